"""Sliding-window rate limiter.

Keeps per-identifier request timestamps in memory. State is not shared
between processes and is cleared on restart.

Usage:
    limiter = InMemoryRateLimiter()
    result = await limiter.is_allowed("api_requests:10.0.0.1", limit=100, window=60)
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Protocol

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class RateLimitResult:
    """Result of a rate limit check."""

    allowed: bool
    remaining: int
    reset_at: float
    retry_after: Optional[float] = None


class RateLimiter(Protocol):
    """Protocol for rate limiter implementations."""

    async def is_allowed(
        self, identifier: str, limit: int, window: int
    ) -> RateLimitResult: ...

    async def get_status(
        self, identifier: str, limit: int, window: int
    ) -> RateLimitResult: ...

    async def reset(self, identifier: str) -> None: ...


@dataclass
class InMemoryRateLimiter:
    """
    In-memory sliding window rate limiter.

    All bucket mutations happen under a single asyncio.Lock, so concurrent
    requests on the event loop never lose an update.
    """

    clock: Callable[[], float] = time.time
    _buckets: Dict[str, list] = field(default_factory=dict)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _last_sweep: float = 0.0

    def _sweep(self, now: float, window: int) -> None:
        """Drop every bucket whose newest request left the window.

        Runs at most once per window so the cost stays amortized.
        """
        if now - self._last_sweep < window:
            return
        self._last_sweep = now
        window_start = now - window
        expired = [
            identifier
            for identifier, bucket in self._buckets.items()
            if not bucket or bucket[-1] <= window_start
        ]
        for identifier in expired:
            del self._buckets[identifier]
        if expired:
            logger.debug("rate_limit_buckets_swept", evicted=len(expired))

    def _prune(self, identifier: str, now: float, window: int) -> list:
        window_start = now - window
        bucket = [t for t in self._buckets.get(identifier, []) if t > window_start]
        if bucket:
            self._buckets[identifier] = bucket
        else:
            # Expired windows are dropped so idle clients don't accumulate
            self._buckets.pop(identifier, None)
        return bucket

    async def is_allowed(
        self,
        identifier: str,
        limit: int,
        window: int,
    ) -> RateLimitResult:
        """Check if request is allowed, recording it when it is."""
        async with self._lock:
            now = self.clock()
            self._sweep(now, window)
            bucket = self._prune(identifier, now, window)

            current_count = len(bucket)
            remaining = max(0, limit - current_count)
            reset_at = min(bucket) + window if bucket else now + window

            if current_count >= limit:
                return RateLimitResult(
                    allowed=False,
                    remaining=0,
                    reset_at=reset_at,
                    retry_after=reset_at - now,
                )

            bucket.append(now)
            self._buckets[identifier] = bucket

            return RateLimitResult(
                allowed=True,
                remaining=remaining - 1,
                reset_at=reset_at,
            )

    async def get_status(
        self,
        identifier: str,
        limit: int,
        window: int,
    ) -> RateLimitResult:
        """Get status without consuming a request."""
        async with self._lock:
            now = self.clock()
            bucket = self._prune(identifier, now, window)

            remaining = max(0, limit - len(bucket))
            reset_at = min(bucket) + window if bucket else now + window

            return RateLimitResult(
                allowed=remaining > 0,
                remaining=remaining,
                reset_at=reset_at,
                retry_after=max(0, reset_at - now) if remaining == 0 else None,
            )

    async def reset(self, identifier: str) -> None:
        """Reset rate limit for identifier."""
        async with self._lock:
            if identifier in self._buckets:
                del self._buckets[identifier]
                logger.debug("rate_limit_reset", identifier=identifier)
