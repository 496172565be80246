"""Errors raised at the text/image service boundary.

Provider SDK exceptions are translated into this hierarchy so that the
retry helper and the managers only ever catch our own types.
"""


class LLMError(Exception):
    """Base class for failures talking to a generation backend."""


class ProviderError(LLMError):
    """The backend rejected or failed the request.

    Attributes:
        is_retryable: True for transient failures (5xx, rate limits).
        status_code: HTTP status, when the backend reported one.
    """

    def __init__(
        self,
        message: str,
        is_retryable: bool = False,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.is_retryable = is_retryable
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Too many requests.

    Attributes:
        retry_after: Server-suggested wait in seconds, if any.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, is_retryable=True, status_code=429)
        self.retry_after = retry_after


class AuthenticationError(ProviderError):
    """Missing or invalid API key."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, is_retryable=False, status_code=401)


class ContentPolicyError(ProviderError):
    """Prompt or output refused by the provider's content policy."""

    def __init__(self, message: str = "Content policy violation") -> None:
        super().__init__(message, is_retryable=False)


class ContextLengthError(ProviderError):
    """Prompt does not fit the model's context window."""

    def __init__(self, message: str) -> None:
        super().__init__(message, is_retryable=False)


class UnsupportedProviderError(LLMError):
    """Configured provider name is not one we can build."""


class StructuredOutputError(LLMError):
    """Generated text could not be parsed into the expected shape.

    Attributes:
        raw_output: The text that failed to parse.
    """

    def __init__(self, message: str, raw_output: str | None = None) -> None:
        super().__init__(message)
        self.raw_output = raw_output
