"""Provider factory.

Builds providers from the task-specific ``provider:model`` settings.
"""

from npcforge.config import ProviderConfig, get_settings
from npcforge.llm.anthropic_provider import AnthropicProvider
from npcforge.llm.base import ImageProvider, LLMProvider
from npcforge.llm.exceptions import UnsupportedProviderError
from npcforge.llm.openai_provider import OpenAIProvider


def _create_provider(config: ProviderConfig) -> LLMProvider:
    """Create a provider from a ProviderConfig.

    Raises:
        UnsupportedProviderError: If provider type is not supported.
    """
    settings = get_settings()
    if config.provider == "anthropic":
        return AnthropicProvider(
            api_key=settings.anthropic_api_key,
            default_model=config.model,
        )
    if config.provider == "openai":
        return OpenAIProvider(
            api_key=settings.openai_api_key,
            default_model=config.model,
            base_url=settings.openai_base_url,
            image_model=settings.image_model,
        )
    raise UnsupportedProviderError(f"Provider '{config.provider}' is not supported")


def get_dialogue_provider() -> LLMProvider:
    """Provider for conversation turns and rumor text (DIALOGUE env var)."""
    return _create_provider(get_settings().dialogue_config)


def get_creative_provider() -> LLMProvider:
    """Provider for backstory enrichment (CREATIVE env var)."""
    return _create_provider(get_settings().creative_config)


def get_image_provider() -> ImageProvider:
    """Provider for portraits. Only OpenAI renders images."""
    settings = get_settings()
    return OpenAIProvider(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        image_model=settings.image_model,
    )
