"""HTTP client for OC Transpo API requests.

Every request first passes the connection's rate limiter, then goes out on
the connection's aiohttp session with the credentials attached. The
real-time endpoints take form-encoded POST bodies; the GTFS endpoint takes
GET query parameters.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from octranspo_api.adapters.api_request_logger import log_api_request
from octranspo_api.adapters.octranspo_api.connection import Connection
from octranspo_api.adapters.octranspo_api.constants import FORM_HEADERS, JSON_HEADERS
from octranspo_api.domain.errors import ConfigurationError, TransportError

if TYPE_CHECKING:
    from aiohttp import ClientResponse

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")


class OcHttpClient:
    """Dispatches requests for one Connection."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    @property
    def connection(self) -> Connection:
        return self._connection

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_bytes = await response.read()
        error_text = error_bytes.decode("utf-8", errors="replace")
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        retry_after = response.headers.get("Retry-After")
        server = response.headers.get("Server", "unknown")
        extra_info_str = f" [Retry-After: {retry_after}]" if retry_after else ""
        logger.error(
            f"OC Transpo API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type}, Server: {server}){extra_info_str}"
        )

    @asynccontextmanager
    async def request(
        self, endpoint: str, params: dict[str, str], method: str = "POST"
    ) -> AsyncIterator["ClientResponse"]:
        """Send a request and yield the unread 200 response.

        The response is released when the ``async with`` block exits.

        Args:
            endpoint: Endpoint name appended to the connection's base URL.
            params: Endpoint parameters; credentials are added here.
            method: "POST" (form body) or "GET" (query string).

        Raises:
            ConfigurationError: If the method is not supported.
            TransportError: If the API answers with a status other than 200.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ConfigurationError(f"unsupported HTTP method {method!r}")

        url = f"{self._connection.base_url}{endpoint}"
        all_params = {**params, **self._connection.auth_params()}

        await self._connection.rate_limiter.acquire()
        session = self._connection.get_session()

        if method == "POST":
            log_api_request(method, url, headers=FORM_HEADERS, payload=all_params)
            body = urlencode(sorted(all_params.items()))
            request_ctx = session.post(url, data=body, headers=FORM_HEADERS)
        else:
            log_api_request(method, url, params=all_params, headers=JSON_HEADERS)
            request_ctx = session.get(url, params=sorted(all_params.items()), headers=JSON_HEADERS)

        async with request_ctx as response:
            if response.status != 200:
                await self._log_error_response(response, url)
                raise TransportError(response.status, response.reason, url)
            yield response

    async def fetch(self, endpoint: str, params: dict[str, str], method: str = "POST") -> bytes:
        """Send a request and return the full body of the 200 response."""
        async with self.request(endpoint, params, method) as response:
            return await response.read()
