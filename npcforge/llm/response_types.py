"""Provider response types."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UsageStats:
    """Token usage reported by the provider."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class LLMResponse:
    """Text completion.

    Attributes:
        content: Generated text.
        finish_reason: Why generation stopped.
        model: Model that produced the text.
        usage: Token usage, when reported.
        raw_response: Provider's raw object, for debugging.
    """

    content: str
    finish_reason: str = "stop"
    model: str = ""
    usage: UsageStats | None = None
    raw_response: Any = None


@dataclass(frozen=True)
class ImageResponse:
    """Generated image reference (URL or data URI)."""

    url: str
    revised_prompt: str | None = None
    model: str = ""
