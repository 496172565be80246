"""OpenAI text and image provider.

Also works against OpenAI-compatible endpoints via ``base_url``.
"""

import logging
from typing import Any, Sequence

from openai import AsyncOpenAI
from openai import (
    APIError as OpenAIAPIError,
    AuthenticationError as OpenAIAuthError,
    BadRequestError as OpenAIBadRequestError,
    OpenAIError,
    RateLimitError as OpenAIRateLimitError,
)

from npcforge.llm.exceptions import (
    AuthenticationError,
    ContentPolicyError,
    ContextLengthError,
    ProviderError,
    RateLimitError,
)
from npcforge.llm.message_types import Message
from npcforge.llm.response_types import ImageResponse, LLMResponse, UsageStats

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """Chat completions plus portrait rendering."""

    def __init__(
        self,
        api_key: str | None = None,
        default_model: str = "gpt-4o-mini",
        base_url: str | None = None,
        image_model: str = "dall-e-3",
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key. Falls back to OPENAI_API_KEY.
            default_model: Chat model used when a call does not name one.
            base_url: Custom base URL for compatible APIs.
            image_model: Model for ``generate_image``.
            client: Pre-configured client (for testing).
        """
        self._api_key = api_key
        self._default_model = default_model
        self._base_url = base_url
        self._image_model = image_model
        self._client_instance: AsyncOpenAI | None = client

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return self._default_model

    def _get_client(self) -> AsyncOpenAI:
        """Get or create the async client."""
        if self._client_instance is None:
            kwargs: dict[str, Any] = {}
            if self._api_key:
                kwargs["api_key"] = self._api_key
            if self._base_url:
                kwargs["base_url"] = self._base_url
            self._client_instance = AsyncOpenAI(**kwargs)
        return self._client_instance

    @staticmethod
    def _translate_error(error: Exception) -> Exception:
        """Map OpenAI SDK exceptions onto our hierarchy."""
        if isinstance(error, OpenAIAuthError):
            return AuthenticationError(str(error))
        if isinstance(error, OpenAIRateLimitError):
            return RateLimitError(str(error))
        if isinstance(error, OpenAIBadRequestError):
            error_str = str(error).lower()
            if "context" in error_str or "length" in error_str:
                return ContextLengthError(str(error))
            if "content" in error_str or "policy" in error_str:
                return ContentPolicyError(str(error))
            return ProviderError(str(error), is_retryable=False)
        if isinstance(error, OpenAIAPIError):
            status_code = getattr(error, "status_code", None)
            is_retryable = status_code is not None and status_code >= 500
            return ProviderError(str(error), is_retryable=is_retryable, status_code=status_code)
        if isinstance(error, OpenAIError):
            return ProviderError(str(error), is_retryable=False)
        return error

    async def complete(
        self,
        messages: Sequence[Message],
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        system_prompt: str | None = None,
    ) -> LLMResponse:
        """Generate a completion from messages."""
        api_messages: list[dict[str, Any]] = []
        if system_prompt:
            api_messages.append({"role": "system", "content": system_prompt})
        api_messages.extend({"role": m.role.value, "content": m.content} for m in messages)

        try:
            response = await self._get_client().chat.completions.create(
                model=model or self._default_model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=api_messages,
            )
        except Exception as e:
            translated = self._translate_error(e)
            if translated is e:
                raise
            raise translated from e

        choice = response.choices[0]
        usage = None
        if response.usage:
            usage = UsageStats(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
                total_tokens=response.usage.total_tokens,
            )
        return LLMResponse(
            content=choice.message.content or "",
            finish_reason=choice.finish_reason or "stop",
            model=response.model,
            usage=usage,
            raw_response=response,
        )

    async def generate_image(self, prompt: str, size: str = "1024x1024") -> ImageResponse:
        """Render a portrait and return its URL or a base64 data URI."""
        try:
            response = await self._get_client().images.generate(
                model=self._image_model,
                prompt=prompt,
                size=size,
                n=1,
            )
        except Exception as e:
            translated = self._translate_error(e)
            if translated is e:
                raise
            raise translated from e

        image = response.data[0]
        if image.url:
            url = image.url
        elif image.b64_json:
            url = f"data:image/png;base64,{image.b64_json}"
        else:
            raise ProviderError("Image response contained no image data")
        return ImageResponse(
            url=url,
            revised_prompt=getattr(image, "revised_prompt", None),
            model=self._image_model,
        )
