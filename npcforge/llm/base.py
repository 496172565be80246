"""Protocols for the external generation backends.

Two layers sit here. ``LLMProvider`` and ``ImageProvider`` are the
SDK-facing providers. ``TextGenerator`` is the narrow prompt-in/text-out
contract the managers depend on, implemented by ``TextService`` and by
test fakes.
"""

from typing import Protocol, Sequence, runtime_checkable

from npcforge.llm.message_types import Message
from npcforge.llm.response_types import ImageResponse, LLMResponse


@runtime_checkable
class LLMProvider(Protocol):
    """Chat completion backend."""

    @property
    def provider_name(self) -> str:
        """Return provider identifier (e.g., 'anthropic', 'openai')."""
        ...

    @property
    def default_model(self) -> str:
        """Return default model for this provider."""
        ...

    async def complete(
        self,
        messages: Sequence[Message],
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        system_prompt: str | None = None,
    ) -> LLMResponse:
        """Generate a completion from messages.

        Args:
            messages: Conversation so far.
            model: Model to use (defaults to provider's default).
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.
            system_prompt: System-level instructions.

        Returns:
            LLMResponse with text and metadata.
        """
        ...


@runtime_checkable
class ImageProvider(Protocol):
    """Text-to-image backend."""

    async def generate_image(self, prompt: str, size: str = "1024x1024") -> ImageResponse:
        """Render an image for the prompt."""
        ...


@runtime_checkable
class TextGenerator(Protocol):
    """Prompt-in/text-out contract used by enrichment, dialogue and rumors."""

    async def generate_text(self, prompt: str, temperature: float = 0.7, max_tokens: int = 150) -> str:
        """Return generated text for the prompt.

        Raises:
            LLMError: When the backend fails.
        """
        ...
