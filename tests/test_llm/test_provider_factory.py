"""Tests for the provider factory."""

from unittest.mock import MagicMock, patch

import pytest

from npcforge.config import ProviderConfig
from npcforge.llm.anthropic_provider import AnthropicProvider
from npcforge.llm.exceptions import UnsupportedProviderError
from npcforge.llm.factory import (
    _create_provider,
    get_creative_provider,
    get_dialogue_provider,
    get_image_provider,
)
from npcforge.llm.openai_provider import OpenAIProvider


@pytest.fixture
def mock_settings():
    settings = MagicMock()
    settings.anthropic_api_key = "test-key"
    settings.openai_api_key = "test-key"
    settings.openai_base_url = None
    settings.image_model = "dall-e-3"
    settings.dialogue_config = ProviderConfig(provider="anthropic", model="claude-3-5-haiku-20241022")
    settings.creative_config = ProviderConfig(provider="openai", model="gpt-4o-mini")
    with patch("npcforge.llm.factory.get_settings", return_value=settings):
        yield settings


class TestFactory:
    """Tests for the task-specific provider getters."""

    def test_dialogue_provider(self, mock_settings):
        provider = get_dialogue_provider()
        assert isinstance(provider, AnthropicProvider)
        assert provider.default_model == "claude-3-5-haiku-20241022"

    def test_creative_provider(self, mock_settings):
        provider = get_creative_provider()
        assert isinstance(provider, OpenAIProvider)
        assert provider.default_model == "gpt-4o-mini"

    def test_image_provider_is_openai(self, mock_settings):
        assert isinstance(get_image_provider(), OpenAIProvider)

    def test_unsupported_provider(self, mock_settings):
        with pytest.raises(UnsupportedProviderError):
            _create_provider(ProviderConfig(provider="ollama", model="llama3"))  # type: ignore[arg-type]
