"""Cooking of raw wire models into domain values.

Each raw shape is turned into its domain value in one pass: text fields are
copied verbatim, the top-level error channel is checked, nested elements are
mapped in wire order, and the first failure aborts the whole value.
"""

import logging
import re
from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel

from octranspo_api.adapters.octranspo_api.constants import (
    AGENCY_TIMEZONE,
    REQUEST_PROCESSING_TIME_FORMAT,
)
from octranspo_api.adapters.octranspo_api.error_codes import check_error_code
from octranspo_api.adapters.octranspo_api.optional_values import (
    optional_bool,
    optional_float,
    parse_float,
    parse_int,
)
from octranspo_api.adapters.octranspo_api.raw_models import (
    RawGtfsResponse,
    RawNextTripsAllRoutesEnvelope,
    RawNextTripsEnvelope,
    RawRouteDirection,
    RawRouteSummaryEnvelope,
    RawRouteWithTrips,
    RawTrip,
)
from octranspo_api.domain.errors import FieldParseError
from octranspo_api.domain.models import (
    GtfsQueryEcho,
    GtfsTable,
    NextTripsForStop,
    NextTripsForStopAllRoutes,
    Route,
    RouteDirection,
    RouteSummaryForStop,
    RouteWithTrips,
    Trip,
)

logger = logging.getLogger(__name__)

_AGENCY_ZONE = ZoneInfo(AGENCY_TIMEZONE)
_PROCESSING_TIME_RE = re.compile(r"[0-9]{14}")


def parse_request_processing_time(text: str) -> datetime:
    """Parse a YYYYMMDDhhmmss stamp as agency-local time.

    Raises:
        FieldParseError: If the text is not exactly 14 digits forming a valid
            date and time.
    """
    if not _PROCESSING_TIME_RE.fullmatch(text):
        raise FieldParseError("RequestProcessingTime", text, "YYYYMMDDhhmmss timestamp")
    try:
        naive = datetime.strptime(text, REQUEST_PROCESSING_TIME_FORMAT)
    except ValueError as e:
        raise FieldParseError("RequestProcessingTime", text, "YYYYMMDDhhmmss timestamp") from e
    return naive.replace(tzinfo=_AGENCY_ZONE)


class ResponseCooker:
    """Turns raw envelopes into domain values."""

    @staticmethod
    def cook_trip(raw: RawTrip) -> Trip:
        """Cook one trip; the two schedule fields are mandatory, the rest optional."""
        return Trip(
            trip_destination=raw.trip_destination,
            trip_start_time=raw.trip_start_time,
            adjusted_schedule_time=parse_int(raw.adjusted_schedule_time, "AdjustedScheduleTime"),
            adjustment_age=parse_float(raw.adjustment_age, "AdjustmentAge"),
            last_trip_of_schedule=optional_bool(raw.last_trip_of_schedule, "LastTripOfSchedule"),
            bus_type=raw.bus_type,
            latitude=optional_float(raw.latitude, "Latitude"),
            longitude=optional_float(raw.longitude, "Longitude"),
            gps_speed=optional_float(raw.gps_speed, "GPSSpeed"),
        )

    @staticmethod
    def cook_trips(raw_trips: list[RawTrip]) -> tuple[Trip, ...]:
        return tuple(ResponseCooker.cook_trip(trip) for trip in raw_trips)

    @staticmethod
    def cook_route_summary(raw: RawRouteSummaryEnvelope) -> RouteSummaryForStop:
        """Cook a GetRouteSummaryForStop envelope.

        Raises:
            ApiError: If the result's Error field holds a known failure code.
        """
        result = raw.body.response.result
        error = check_error_code(result.error.text)

        routes = tuple(
            Route(
                route_no=route.route_no,
                direction_id=route.direction_id,
                direction=route.direction,
                route_heading=route.route_heading,
            )
            for route in result.routes.route
        )
        return RouteSummaryForStop(
            stop_no=result.stop_no.text,
            stop_description=result.stop_description.text,
            error=error,
            routes=routes,
        )

    @staticmethod
    def cook_route_direction(raw: RawRouteDirection) -> RouteDirection:
        """Cook one route direction, checking its own error channel.

        Raises:
            ApiError: If the direction's Error field holds a known failure code.
            FieldParseError: If RequestProcessingTime or a trip field is invalid.
        """
        error = check_error_code(raw.error)
        return RouteDirection(
            route_no=raw.route_no,
            route_label=raw.route_label,
            direction=raw.direction,
            error=error,
            request_processing_time=parse_request_processing_time(raw.request_processing_time),
            trips=ResponseCooker.cook_trips(raw.trips.trip),
        )

    @staticmethod
    def cook_next_trips(raw: RawNextTripsEnvelope) -> NextTripsForStop:
        """Cook a GetNextTripsForStop envelope."""
        result = raw.body.response.result
        error = check_error_code(result.error.text)

        route_directions = tuple(
            ResponseCooker.cook_route_direction(direction)
            for direction in result.route.route_direction
        )
        return NextTripsForStop(
            stop_no=result.stop_no.text,
            stop_label=result.stop_label.text,
            error=error,
            route_directions=route_directions,
        )

    @staticmethod
    def cook_route_with_trips(raw: RawRouteWithTrips) -> RouteWithTrips:
        return RouteWithTrips(
            route_no=raw.route_no,
            direction_id=raw.direction_id,
            direction=raw.direction,
            route_heading=raw.route_heading,
            trips=ResponseCooker.cook_trips(raw.trips.trip),
        )

    @staticmethod
    def cook_next_trips_all_routes(
        raw: RawNextTripsAllRoutesEnvelope,
    ) -> NextTripsForStopAllRoutes:
        """Cook a GetNextTripsForStopAllRoutes envelope."""
        result = raw.body.response.result
        error = check_error_code(result.error.text)

        routes = tuple(ResponseCooker.cook_route_with_trips(route) for route in result.routes.route)
        return NextTripsForStopAllRoutes(
            stop_no=result.stop_no.text,
            stop_description=result.stop_description.text,
            error=error,
            routes=routes,
        )

    @staticmethod
    def cook_gtfs_table(raw: RawGtfsResponse[BaseModel], row_type: type) -> GtfsTable:
        """Cook a tabular response; every column is copied as text.

        Args:
            raw: Decoded tabular response.
            row_type: Domain row dataclass whose fields match the wire keys.
        """
        query = raw.query
        echo = GtfsQueryEcho(
            table=query.table,
            direction=query.direction,
            column=query.column,
            value=query.value,
            format=query.format,
        )
        rows = tuple(row_type(**row.model_dump()) for row in raw.gtfs)
        logger.debug(f"Cooked {len(rows)} {echo.table or row_type.__name__} rows")
        return GtfsTable(query=echo, rows=rows)
