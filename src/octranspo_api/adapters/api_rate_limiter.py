"""Rate limiter for outgoing API requests.

A token bucket owned by a single Connection: bursts of up to ``burst`` calls
go through immediately, after which calls are admitted at the steady rate.
Independent connections each hold their own limiter and never share quota.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time

from octranspo_api.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class TokenBucketRateLimiter:
    """Token bucket admission control for outgoing API requests.

    Async-safe: token accounting happens under an asyncio.Lock, which wakes
    waiters in arrival order, so a steady stream of callers at or below the
    configured rate is never starved.
    """

    def __init__(
        self,
        api_name: str,
        rate_per_second: float | None = None,
        burst: int = 1,
    ) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            rate_per_second: Steady admission rate. None or math.inf disables
                limiting entirely.
            burst: Number of calls that may go through back to back.

        Raises:
            ConfigurationError: If the rate is not positive or burst is below 1.
        """
        if rate_per_second is not None and not rate_per_second > 0:
            raise ConfigurationError(
                f"rate_per_second must be positive, got {rate_per_second!r}"
            )
        if burst < 1:
            raise ConfigurationError(f"burst must be at least 1, got {burst!r}")

        self.api_name = api_name
        self.rate_per_second = math.inf if rate_per_second is None else float(rate_per_second)
        self.burst = burst
        self._tokens: float = float(burst)
        self._last_refill: float = time.monotonic()
        self._lock: asyncio.Lock | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def unlimited(cls, api_name: str) -> TokenBucketRateLimiter:
        """Create a limiter that never waits."""
        return cls(api_name, rate_per_second=None)

    @property
    def is_unlimited(self) -> bool:
        return math.isinf(self.rate_per_second)

    @property
    def available_tokens(self) -> float:
        """Tokens available right now, without consuming any."""
        if self.is_unlimited:
            return math.inf
        elapsed = time.monotonic() - self._last_refill
        return min(float(self.burst), self._tokens + elapsed * self.rate_per_second)

    def _get_lock(self) -> asyncio.Lock:
        """Return the lock for the running event loop.

        An asyncio.Lock is bound to the loop it is first contended on, so a
        limiter reused under a new loop gets a fresh lock.
        """
        loop = asyncio.get_running_loop()
        if self._lock is None or self._loop is not loop:
            self._lock = asyncio.Lock()
            self._loop = loop
        return self._lock

    def _refill(self) -> None:
        now = time.monotonic()
        elapsed = now - self._last_refill
        self._last_refill = now
        self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate_per_second)

    async def acquire(self) -> None:
        """Acquire permission to make a request.

        Blocks until a token is available. Cancelling the waiting task (for
        example through asyncio.wait_for) aborts the wait without consuming
        a token.
        """
        if self.is_unlimited:
            return

        async with self._get_lock():
            self._refill()
            if self._tokens < 1.0:
                wait_time = (1.0 - self._tokens) / self.rate_per_second
                logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                await asyncio.sleep(wait_time)
                self._refill()

            # Guard against float drift after the sleep
            self._tokens = max(self._tokens, 1.0) - 1.0

    async def __aenter__(self) -> TokenBucketRateLimiter:
        """Context manager entry - acquire rate limit."""
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Context manager exit - nothing to do."""
