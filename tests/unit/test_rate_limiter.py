"""Unit tests for the in-memory rate limiter."""

import asyncio

import pytest

from palette_api.core.rate_limiter import InMemoryRateLimiter, RateLimitResult


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestInMemoryRateLimiter:
    """Test in-memory rate limiter."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def limiter(self, clock):
        """Fresh rate limiter for each test."""
        return InMemoryRateLimiter(clock=clock)

    @pytest.mark.asyncio
    async def test_allows_requests_under_limit(self, limiter):
        """Requests under limit are allowed."""
        result = await limiter.is_allowed("test", limit=5, window=60)

        assert isinstance(result, RateLimitResult)
        assert result.allowed is True
        assert result.remaining == 4

    @pytest.mark.asyncio
    async def test_blocks_requests_over_limit(self, limiter):
        """Requests over limit are blocked."""
        for _ in range(5):
            await limiter.is_allowed("test", limit=5, window=60)

        result = await limiter.is_allowed("test", limit=5, window=60)

        assert result.allowed is False
        assert result.remaining == 0
        assert result.retry_after == pytest.approx(60.0)

    @pytest.mark.asyncio
    async def test_window_expiry_restores_quota(self, limiter, clock):
        """Once the window slides past old requests they stop counting."""
        for _ in range(5):
            await limiter.is_allowed("test", limit=5, window=60)

        clock.now += 61
        result = await limiter.is_allowed("test", limit=5, window=60)

        assert result.allowed is True
        assert result.remaining == 4

    @pytest.mark.asyncio
    async def test_window_is_sliding(self, limiter, clock):
        """Only requests older than the window are released."""
        for _ in range(3):
            await limiter.is_allowed("test", limit=5, window=60)
        clock.now += 30
        for _ in range(2):
            await limiter.is_allowed("test", limit=5, window=60)

        clock.now += 31
        status = await limiter.get_status("test", limit=5, window=60)

        assert status.remaining == 3

    @pytest.mark.asyncio
    async def test_different_identifiers_independent(self, limiter):
        """Different identifiers have independent limits."""
        for _ in range(5):
            await limiter.is_allowed("A", limit=5, window=60)

        result = await limiter.is_allowed("B", limit=5, window=60)

        assert result.allowed is True

    @pytest.mark.asyncio
    async def test_reset_clears_limit(self, limiter):
        """Reset clears the rate limit."""
        for _ in range(5):
            await limiter.is_allowed("test", limit=5, window=60)

        await limiter.reset("test")

        result = await limiter.is_allowed("test", limit=5, window=60)
        assert result.allowed is True

    @pytest.mark.asyncio
    async def test_get_status_does_not_consume(self, limiter):
        """get_status doesn't consume a request."""
        status1 = await limiter.get_status("test", limit=5, window=60)
        status2 = await limiter.get_status("test", limit=5, window=60)

        assert status1.remaining == 5
        assert status2.remaining == 5

    @pytest.mark.asyncio
    async def test_concurrent_requests_respect_limit(self, limiter):
        """Concurrent requests don't exceed limit."""

        async def make_request():
            return await limiter.is_allowed("concurrent", limit=5, window=60)

        results = await asyncio.gather(*[make_request() for _ in range(10)])

        allowed_count = sum(1 for r in results if r.allowed)
        assert allowed_count == 5

    @pytest.mark.asyncio
    async def test_idle_clients_are_evicted(self, limiter, clock):
        """Buckets of clients that went idle are swept on a later check."""
        for i in range(1000):
            await limiter.is_allowed(f"client-{i}", limit=5, window=60)
        assert len(limiter._buckets) == 1000

        clock.now += 3600
        await limiter.is_allowed("latecomer", limit=5, window=60)

        assert list(limiter._buckets) == ["latecomer"]

    @pytest.mark.asyncio
    async def test_sweep_keeps_active_clients(self, limiter, clock):
        """Only buckets with nothing left in the window are swept."""
        await limiter.is_allowed("idle", limit=5, window=60)
        clock.now += 30
        await limiter.is_allowed("active", limit=5, window=60)
        clock.now += 31

        await limiter.is_allowed("new", limit=5, window=60)

        assert set(limiter._buckets) == {"active", "new"}
        status = await limiter.get_status("active", limit=5, window=60)
        assert status.remaining == 4
