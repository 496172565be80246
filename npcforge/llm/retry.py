"""Retry utilities for generation calls.

Exponential backoff with jitter for transient provider failures.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from npcforge.llm.exceptions import ProviderError, RateLimitError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Attributes:
        max_retries: Maximum number of retry attempts.
        initial_delay: Initial delay in seconds.
        max_delay: Maximum delay between retries.
        exponential_base: Base for exponential backoff.
        jitter: Whether to add random jitter.
    """

    max_retries: int = 3
    initial_delay: float = 1.0
    max_delay: float = 60.0
    exponential_base: float = 2.0
    jitter: bool = True


async def with_retry(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    config: RetryConfig | None = None,
    **kwargs: Any,
) -> T:
    """Execute an async function, retrying rate limits and 5xx errors.

    Authentication, bad-request and content-policy errors are raised
    immediately.

    Args:
        func: Async function to execute.
        *args: Positional arguments for func.
        config: Retry configuration.
        **kwargs: Keyword arguments for func.

    Returns:
        Result from the first successful call.

    Raises:
        The last exception if all retries fail.
    """
    config = config or RetryConfig()

    for attempt in range(config.max_retries + 1):
        try:
            return await func(*args, **kwargs)
        except RateLimitError as e:
            if attempt == config.max_retries:
                raise
            delay = _calculate_delay(attempt, config, e.retry_after)
        except ProviderError as e:
            if not e.is_retryable or attempt == config.max_retries:
                raise
            delay = _calculate_delay(attempt, config)
        logger.warning(
            "Transient provider failure, retry %d/%d in %.1fs",
            attempt + 1,
            config.max_retries,
            delay,
        )
        await asyncio.sleep(delay)

    raise RuntimeError("Max retries exceeded without error")


def _calculate_delay(
    attempt: int,
    config: RetryConfig,
    retry_after: float | None = None,
) -> float:
    """Delay before the next attempt (0-indexed), honoring retry-after."""
    delay = min(config.initial_delay * (config.exponential_base**attempt), config.max_delay)

    if retry_after is not None:
        delay = max(delay, retry_after)

    if config.jitter:
        # Up to 25% extra
        delay += random.uniform(0, delay * 0.25)

    return delay
