"""Connection to the OC Transpo API.

A connection bundles the credentials, the base address, the rate limiter and
the aiohttp session. Every request made through it passes the same limiter,
so callers cannot exceed the configured rate; separate connections never
share quota.

A connection belongs to one event loop: its aiohttp session is bound to the
loop it was created on, so create a new connection for each asyncio.run call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aiohttp import ClientSession

from octranspo_api.adapters.api_rate_limiter import TokenBucketRateLimiter
from octranspo_api.adapters.octranspo_api.constants import API_NAME, API_URL_PREFIX

if TYPE_CHECKING:
    from octranspo_api.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)


class Connection:
    """Credentials, rate limiter and HTTP session for the OC Transpo API."""

    def __init__(
        self,
        app_id: str,
        api_key: str,
        rate_limiter: TokenBucketRateLimiter | None = None,
        base_url: str = API_URL_PREFIX,
        session: ClientSession | None = None,
        request_timeout: float | None = None,
    ) -> None:
        """Initialize a connection.

        Args:
            app_id: Application ID issued by the developer portal.
            api_key: API key issued by the developer portal.
            rate_limiter: Limiter gating every request. Defaults to unlimited.
            base_url: Base address the endpoint names are appended to.
            session: aiohttp session to use. When omitted, one is created on
                first use and closed by close().
            request_timeout: Default timeout in seconds for a whole request,
                rate limiter wait included. None waits indefinitely.
        """
        self.app_id = app_id
        self.api_key = api_key
        self.rate_limiter = rate_limiter or TokenBucketRateLimiter.unlimited(API_NAME)
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.request_timeout = request_timeout
        self._session = session
        self._owns_session = session is None

    @classmethod
    def with_rate_limit(
        cls,
        app_id: str,
        api_key: str,
        rate_per_second: float,
        burst: int = 1,
        **kwargs: Any,
    ) -> Connection:
        """Create a connection limited to ``rate_per_second`` with bursts of ``burst``."""
        limiter = TokenBucketRateLimiter(API_NAME, rate_per_second=rate_per_second, burst=burst)
        logger.info(f"Rate limiting {API_NAME} to {rate_per_second}/s (burst {burst})")
        return cls(app_id, api_key, rate_limiter=limiter, **kwargs)

    @classmethod
    def from_config(cls, config: AppConfig, session: ClientSession | None = None) -> Connection:
        """Create a connection from application configuration."""
        limiter = TokenBucketRateLimiter(
            API_NAME,
            rate_per_second=config.rate_limit_per_second,
            burst=config.rate_limit_burst,
        )
        if limiter.is_unlimited:
            logger.info(f"No rate limit configured for {API_NAME}")
        else:
            logger.info(
                f"Rate limiting {API_NAME} to {config.rate_limit_per_second}/s "
                f"(burst {config.rate_limit_burst})"
            )
        return cls(
            config.octranspo_app_id,
            config.octranspo_api_key,
            rate_limiter=limiter,
            base_url=config.octranspo_api_url,
            session=session,
            request_timeout=config.request_timeout_seconds,
        )

    def auth_params(self) -> dict[str, str]:
        """Credential parameters sent with every request."""
        return {"appID": self.app_id, "apiKey": self.api_key}

    def get_session(self) -> ClientSession:
        """Return the HTTP session, creating an owned one on first use."""
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this connection created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def __aenter__(self) -> Connection:
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        await self.close()
