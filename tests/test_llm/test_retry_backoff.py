"""Tests for LLM retry utilities."""

import pytest
from unittest.mock import AsyncMock, patch

from npcforge.llm.retry import RetryConfig, _calculate_delay, with_retry
from npcforge.llm.exceptions import AuthenticationError, ProviderError, RateLimitError


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("npcforge.llm.retry.asyncio.sleep", new=AsyncMock()) as mock_sleep:
        yield mock_sleep


class TestRetryConfig:
    """Tests for RetryConfig dataclass."""

    def test_default_config(self):
        """Test default retry configuration."""
        config = RetryConfig()
        assert config.max_retries == 3
        assert config.initial_delay == 1.0
        assert config.max_delay == 60.0
        assert config.exponential_base == 2.0
        assert config.jitter is True


class TestWithRetry:
    """Tests for with_retry function."""

    @pytest.mark.asyncio
    async def test_successful_call_no_retry(self):
        """Successful calls are not retried."""
        mock_func = AsyncMock(return_value="success")

        result = await with_retry(mock_func)

        assert result == "success"
        assert mock_func.call_count == 1

    @pytest.mark.asyncio
    async def test_retry_on_rate_limit(self, no_sleep):
        """Rate limits are retried."""
        mock_func = AsyncMock(side_effect=[RateLimitError("Rate limited"), "success"])

        result = await with_retry(mock_func, config=RetryConfig(jitter=False))

        assert result == "success"
        assert mock_func.call_count == 2
        no_sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_retry_on_server_error(self):
        """Retryable provider errors are retried."""
        mock_func = AsyncMock(
            side_effect=[ProviderError("503", is_retryable=True, status_code=503), "ok"]
        )
        assert await with_retry(mock_func, config=RetryConfig(jitter=False)) == "ok"

    @pytest.mark.asyncio
    async def test_no_retry_on_auth_error(self):
        """Authentication errors propagate immediately."""
        mock_func = AsyncMock(side_effect=AuthenticationError("Invalid key"))

        with pytest.raises(AuthenticationError):
            await with_retry(mock_func)
        assert mock_func.call_count == 1

    @pytest.mark.asyncio
    async def test_no_retry_on_non_retryable(self):
        mock_func = AsyncMock(side_effect=ProviderError("bad request", is_retryable=False))

        with pytest.raises(ProviderError):
            await with_retry(mock_func)
        assert mock_func.call_count == 1

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self):
        """The last error is raised once retries run out."""
        mock_func = AsyncMock(side_effect=RateLimitError("Rate limited"))

        with pytest.raises(RateLimitError):
            await with_retry(mock_func, config=RetryConfig(max_retries=2, jitter=False))
        assert mock_func.call_count == 3

    @pytest.mark.asyncio
    async def test_passes_arguments(self):
        mock_func = AsyncMock(return_value="ok")
        await with_retry(mock_func, "a", key="b")
        mock_func.assert_awaited_once_with("a", key="b")


class TestCalculateDelay:
    """Tests for backoff delays."""

    def test_exponential(self):
        config = RetryConfig(initial_delay=1.0, exponential_base=2.0, jitter=False)
        assert [_calculate_delay(i, config) for i in range(4)] == [1.0, 2.0, 4.0, 8.0]

    def test_capped(self):
        config = RetryConfig(initial_delay=10.0, max_delay=15.0, jitter=False)
        assert _calculate_delay(3, config) == 15.0

    def test_retry_after_honored(self):
        config = RetryConfig(initial_delay=1.0, jitter=False)
        assert _calculate_delay(0, config, retry_after=30.0) == 30.0

    def test_jitter_bounded(self):
        config = RetryConfig(initial_delay=4.0, jitter=True)
        for _ in range(50):
            assert 4.0 <= _calculate_delay(0, config) <= 5.0
