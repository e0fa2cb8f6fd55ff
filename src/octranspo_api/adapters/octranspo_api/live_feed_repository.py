"""OC Transpo real-time feed repository."""

import asyncio
import logging

from octranspo_api.adapters.octranspo_api.connection import Connection
from octranspo_api.adapters.octranspo_api.constants import (
    NEXT_TRIPS_FOR_STOP,
    NEXT_TRIPS_FOR_STOP_ALL_ROUTES,
    ROUTE_SUMMARY_FOR_STOP,
)
from octranspo_api.adapters.octranspo_api.http_client import OcHttpClient
from octranspo_api.adapters.octranspo_api.raw_decoder import decode_xml_envelope
from octranspo_api.adapters.octranspo_api.raw_models import (
    RawNextTripsAllRoutesEnvelope,
    RawNextTripsEnvelope,
    RawRouteSummaryEnvelope,
)
from octranspo_api.adapters.octranspo_api.response_cooker import ResponseCooker
from octranspo_api.domain.models import (
    NextTripsForStop,
    NextTripsForStopAllRoutes,
    RouteSummaryForStop,
)

logger = logging.getLogger(__name__)


class OcLiveFeedRepository:
    """Live feed repository backed by the SOAP endpoints."""

    def __init__(self, connection: Connection, http_client: OcHttpClient | None = None) -> None:
        """Initialize with a connection and optional preconfigured HTTP client."""
        self._connection = connection
        self._http_client = http_client or OcHttpClient(connection)

    async def _post(self, endpoint: str, params: dict[str, str], timeout: float | None) -> bytes:
        """POST to an endpoint, bounding the whole exchange by the timeout."""
        effective_timeout = timeout if timeout is not None else self._connection.request_timeout
        fetch = self._http_client.fetch(endpoint, params, "POST")
        if effective_timeout is None:
            return await fetch
        return await asyncio.wait_for(fetch, effective_timeout)

    async def get_route_summary_for_stop(
        self, stop_no: str, timeout: float | None = None
    ) -> RouteSummaryForStop:
        """Get the routes serving a stop.

        Args:
            stop_no: 4-digit stop number as printed on the stop sign.
            timeout: Seconds to allow for the whole request. Defaults to the
                connection's request timeout.

        Raises:
            TransportError: On a non-200 response.
            DecodeError: If the body is not the expected envelope.
            ApiError: If the feed reports a known error code.
        """
        body = await self._post(ROUTE_SUMMARY_FOR_STOP, {"stopNo": stop_no}, timeout)
        raw = decode_xml_envelope(body, RawRouteSummaryEnvelope)
        summary = ResponseCooker.cook_route_summary(raw)
        logger.debug(f"Stop {stop_no}: {len(summary.routes)} routes")
        return summary

    async def get_next_trips_for_stop(
        self, route_no: str, stop_no: str, timeout: float | None = None
    ) -> NextTripsForStop:
        """Get the next trips for one route at a stop.

        Raises:
            TransportError: On a non-200 response.
            DecodeError: If the body is not the expected envelope.
            ApiError: If the feed reports a known error code, at the top level
                or for any route direction.
            FieldParseError: If a timestamp or trip field does not parse.
        """
        params = {"routeNo": route_no, "stopNo": stop_no}
        body = await self._post(NEXT_TRIPS_FOR_STOP, params, timeout)
        raw = decode_xml_envelope(body, RawNextTripsEnvelope)
        return ResponseCooker.cook_next_trips(raw)

    async def get_next_trips_for_stop_all_routes(
        self, stop_no: str, timeout: float | None = None
    ) -> NextTripsForStopAllRoutes:
        """Get the next trips for every route at a stop."""
        body = await self._post(NEXT_TRIPS_FOR_STOP_ALL_ROUTES, {"stopNo": stop_no}, timeout)
        raw = decode_xml_envelope(body, RawNextTripsAllRoutesEnvelope)
        return ResponseCooker.cook_next_trips_all_routes(raw)
