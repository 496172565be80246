"""Text and image generation boundary.

Quick Start:
    from npcforge.llm import TextService, get_dialogue_provider

    service = TextService(get_dialogue_provider())
    line = await service.generate_text("Greet the traveler.", temperature=0.8)
"""

# Message types
from npcforge.llm.message_types import Message, MessageRole

# Response types
from npcforge.llm.response_types import ImageResponse, LLMResponse, UsageStats

# Protocols
from npcforge.llm.base import ImageProvider, LLMProvider, TextGenerator

# Providers
from npcforge.llm.anthropic_provider import AnthropicProvider
from npcforge.llm.openai_provider import OpenAIProvider

# Factory
from npcforge.llm.factory import get_creative_provider, get_dialogue_provider, get_image_provider

# Services
from npcforge.llm.dialogue_quality import DialogueQualityJudge
from npcforge.llm.text_service import TextService, extract_text

# Retry utilities
from npcforge.llm.retry import RetryConfig, with_retry

# Exceptions
from npcforge.llm.exceptions import (
    AuthenticationError,
    ContentPolicyError,
    ContextLengthError,
    LLMError,
    ProviderError,
    RateLimitError,
    StructuredOutputError,
    UnsupportedProviderError,
)

__all__ = [
    "Message",
    "MessageRole",
    "ImageResponse",
    "LLMResponse",
    "UsageStats",
    "ImageProvider",
    "LLMProvider",
    "TextGenerator",
    "AnthropicProvider",
    "OpenAIProvider",
    "get_creative_provider",
    "get_dialogue_provider",
    "get_image_provider",
    "DialogueQualityJudge",
    "TextService",
    "extract_text",
    "RetryConfig",
    "with_retry",
    "AuthenticationError",
    "ContentPolicyError",
    "ContextLengthError",
    "LLMError",
    "ProviderError",
    "RateLimitError",
    "StructuredOutputError",
    "UnsupportedProviderError",
]
