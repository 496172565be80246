"""Anthropic Claude text provider."""

import logging
from typing import Any, Sequence

from anthropic import AsyncAnthropic
from anthropic import (
    AnthropicError,
    APIError as AnthropicAPIError,
    AuthenticationError as AnthropicAuthError,
    BadRequestError as AnthropicBadRequestError,
    RateLimitError as AnthropicRateLimitError,
)

from npcforge.llm.exceptions import (
    AuthenticationError,
    ContentPolicyError,
    ContextLengthError,
    ProviderError,
    RateLimitError,
)
from npcforge.llm.message_types import Message, MessageRole
from npcforge.llm.response_types import LLMResponse, UsageStats

logger = logging.getLogger(__name__)


class AnthropicProvider:
    """Claude chat completions for dialogue, rumors and backstories."""

    def __init__(
        self,
        api_key: str | None = None,
        default_model: str = "claude-3-5-haiku-20241022",
        client: AsyncAnthropic | None = None,
    ) -> None:
        """Initialize Anthropic provider.

        Args:
            api_key: Anthropic API key. Falls back to ANTHROPIC_API_KEY.
            default_model: Model used when a call does not name one.
            client: Pre-configured client (for testing).
        """
        self._api_key = api_key
        self._default_model = default_model
        self._client_instance: AsyncAnthropic | None = client

    @property
    def provider_name(self) -> str:
        return "anthropic"

    @property
    def default_model(self) -> str:
        return self._default_model

    def _get_client(self) -> AsyncAnthropic:
        """Get or create the async client."""
        if self._client_instance is None:
            self._client_instance = AsyncAnthropic(api_key=self._api_key or None)
        return self._client_instance

    @staticmethod
    def _convert_messages(messages: Sequence[Message]) -> tuple[str | None, list[dict[str, Any]]]:
        """Split out the system message; Anthropic takes it as a parameter."""
        system_prompt: str | None = None
        api_messages: list[dict[str, Any]] = []
        for msg in messages:
            if msg.role == MessageRole.SYSTEM:
                system_prompt = msg.content
                continue
            api_messages.append({"role": msg.role.value, "content": msg.content})
        return system_prompt, api_messages

    @staticmethod
    def _parse_response(response: Any) -> LLMResponse:
        content = "".join(block.text for block in response.content if block.type == "text")
        usage = None
        if response.usage:
            usage = UsageStats(
                prompt_tokens=response.usage.input_tokens,
                completion_tokens=response.usage.output_tokens,
                total_tokens=response.usage.input_tokens + response.usage.output_tokens,
            )
        return LLMResponse(
            content=content,
            finish_reason=response.stop_reason or "stop",
            model=response.model,
            usage=usage,
            raw_response=response,
        )

    @staticmethod
    def _translate_error(error: Exception) -> Exception:
        """Map Anthropic SDK exceptions onto our hierarchy."""
        if isinstance(error, AnthropicAuthError):
            return AuthenticationError(str(error))
        if isinstance(error, AnthropicRateLimitError):
            return RateLimitError(str(error))
        if isinstance(error, AnthropicBadRequestError):
            error_str = str(error).lower()
            if "context" in error_str or "token" in error_str:
                return ContextLengthError(str(error))
            if "content" in error_str or "policy" in error_str:
                return ContentPolicyError(str(error))
            return ProviderError(str(error), is_retryable=False)
        if isinstance(error, AnthropicAPIError):
            # 5xx errors are retryable
            status_code = getattr(error, "status_code", None)
            is_retryable = status_code is not None and status_code >= 500
            return ProviderError(str(error), is_retryable=is_retryable, status_code=status_code)
        if isinstance(error, AnthropicError):
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
        extracted_system, api_messages = self._convert_messages(messages)
        final_system = system_prompt or extracted_system

        kwargs: dict[str, Any] = {
            "model": model or self._default_model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": api_messages,
        }
        if final_system:
            kwargs["system"] = final_system

        try:
            response = await self._get_client().messages.create(**kwargs)
        except Exception as e:
            translated = self._translate_error(e)
            if translated is e:
                raise
            raise translated from e
        return self._parse_response(response)
