"""Prompt-in/text-out service over an LLM provider."""

import logging
import re

from npcforge.llm.base import LLMProvider
from npcforge.llm.message_types import Message
from npcforge.llm.retry import RetryConfig, with_retry

logger = logging.getLogger(__name__)

_WRAPPER_TOKENS = re.compile(r"\[/?output\d*\]", re.IGNORECASE)
_COMMENT_BLOCKS = re.compile(r"\[comment\][\s\S]*?\[/comment\]", re.IGNORECASE)
_ROLE_PREFIX = re.compile(r"^\s*(Assistant|AI|Response):\s*", re.IGNORECASE)


def extract_text(raw: str) -> str:
    """Strip wrapper tokens, comment blocks and a leading role prefix."""
    text = _COMMENT_BLOCKS.sub("", raw)
    text = _WRAPPER_TOKENS.sub("", text)
    text = _ROLE_PREFIX.sub("", text)
    return text.strip()


class TextService:
    """Sends a single user prompt and returns cleaned text.

    Transient provider failures are retried with backoff; everything else
    propagates so callers can fall back.
    """

    def __init__(self, provider: LLMProvider, retry_config: RetryConfig | None = None) -> None:
        self.provider = provider
        self.retry_config = retry_config or RetryConfig()

    async def generate_text(self, prompt: str, temperature: float = 0.7, max_tokens: int = 150) -> str:
        logger.debug(
            "Generating text via %s (temperature=%.2f, max_tokens=%d)",
            self.provider.provider_name,
            temperature,
            max_tokens,
        )
        response = await with_retry(
            self.provider.complete,
            messages=[Message.user(prompt)],
            max_tokens=max_tokens,
            temperature=temperature,
            config=self.retry_config,
        )
        return extract_text(response.content)
