"""Application configuration using pydantic-settings."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


ProviderType = Literal["anthropic", "openai"]
ImageStyle = Literal["photorealistic", "anime", "artistic", "cartoon", "cinematic"]


@dataclass
class ProviderConfig:
    """Parsed provider:model configuration."""

    provider: ProviderType
    model: str


def parse_provider_config(value: str, default_provider: ProviderType = "anthropic") -> ProviderConfig:
    """Parse 'provider:model' format into ProviderConfig.

    Args:
        value: String in format 'provider:model' or just 'model'.
        default_provider: Provider to use if only model is specified.

    Returns:
        ProviderConfig with provider and model.

    Examples:
        >>> parse_provider_config("anthropic:claude-3-5-haiku-20241022")
        ProviderConfig(provider='anthropic', model='claude-3-5-haiku-20241022')

        >>> parse_provider_config("openai:gpt-4o-mini")
        ProviderConfig(provider='openai', model='gpt-4o-mini')

        >>> parse_provider_config("gpt-4o-mini", default_provider="openai")
        ProviderConfig(provider='openai', model='gpt-4o-mini')
    """
    valid_providers = ("anthropic", "openai")

    if ":" in value:
        first_part = value.split(":")[0]
        if first_part in valid_providers:
            model = value[len(first_part) + 1 :]  # Everything after 'provider:'
            return ProviderConfig(provider=first_part, model=model)  # type: ignore

    return ProviderConfig(provider=default_provider, model=value)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Save store
    database_url: str = "sqlite:///npcforge.db"

    # API Keys
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    openai_base_url: str | None = None  # Custom endpoint for compatible APIs

    # ==========================================================================
    # Task-Specific LLM Configuration (provider:model format)
    # ==========================================================================
    # Examples:
    #   DIALOGUE=anthropic:claude-3-5-haiku-20241022
    #   CREATIVE=openai:gpt-4o-mini

    dialogue: str = "anthropic:claude-3-5-haiku-20241022"  # Conversation turns, rumors
    creative: str = "anthropic:claude-3-5-haiku-20241022"  # Backstory enrichment
    image_model: str = "dall-e-3"  # OpenAI image model for portraits
    image_style: ImageStyle = "photorealistic"

    # ==========================================================================
    # World Settings
    # ==========================================================================
    world_seed: str | None = None  # None = derive from the clock
    max_population: int = 50
    memory_capacity: int = 100
    conversation_history_limit: int = 50
    dialogue_max_attempts: int = 3
    rumor_range: int = 3
    enrich_on_spawn: bool = False

    # Background population
    background_batch_size: int = 3
    background_batch_delay: float = 2.0  # Seconds between enrichment calls

    # Debug
    debug: bool = False
    log_level: str = "WARNING"

    # ==========================================================================
    # Parsed Configuration Properties
    # ==========================================================================

    @property
    def dialogue_config(self) -> ProviderConfig:
        """Get parsed dialogue provider config."""
        return parse_provider_config(self.dialogue)

    @property
    def creative_config(self) -> ProviderConfig:
        """Get parsed creative provider config."""
        return parse_provider_config(self.creative)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
