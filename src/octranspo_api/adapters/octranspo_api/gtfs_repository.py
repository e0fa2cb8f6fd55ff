"""OC Transpo GTFS schedule repository."""

import asyncio
import logging
from typing import Any

from octranspo_api.adapters.octranspo_api.connection import Connection
from octranspo_api.adapters.octranspo_api.constants import (
    GTFS,
    TABLE_AGENCY,
    TABLE_CALENDAR,
    TABLE_CALENDAR_DATES,
    TABLE_ROUTES,
    TABLE_STOP_TIMES,
    TABLE_STOPS,
    TABLE_TRIPS,
    TABLES_REQUIRING_SELECTOR,
)
from octranspo_api.adapters.octranspo_api.http_client import OcHttpClient
from octranspo_api.adapters.octranspo_api.raw_decoder import decode_json_table
from octranspo_api.adapters.octranspo_api.raw_models import (
    RawGtfsAgency,
    RawGtfsCalendar,
    RawGtfsCalendarDate,
    RawGtfsResponse,
    RawGtfsRoute,
    RawGtfsStop,
    RawGtfsStopTime,
    RawGtfsTrip,
)
from octranspo_api.adapters.octranspo_api.response_cooker import ResponseCooker
from octranspo_api.domain.errors import ConfigurationError
from octranspo_api.domain.models import (
    GtfsAgency,
    GtfsCalendar,
    GtfsCalendarDate,
    GtfsRoute,
    GtfsStop,
    GtfsStopTime,
    GtfsTable,
    GtfsTrip,
)
from octranspo_api.domain.ports.gtfs_repository import QueryOption

logger = logging.getLogger(__name__)


class OcGtfsRepository:
    """GTFS repository backed by the JSON Gtfs endpoint."""

    def __init__(self, connection: Connection, http_client: OcHttpClient | None = None) -> None:
        """Initialize with a connection and optional preconfigured HTTP client."""
        self._connection = connection
        self._http_client = http_client or OcHttpClient(connection)

    @staticmethod
    def build_params(table: str, options: tuple[QueryOption, ...]) -> dict[str, str]:
        """Build the query parameters for a table request.

        Raises:
            ConfigurationError: If the table needs a selector and none was given.
        """
        params = {"table": table, "format": "json"}
        for option in options:
            option(params)

        if table in TABLES_REQUIRING_SELECTOR and "id" not in params and "column" not in params:
            raise ConfigurationError(
                f"the {table} table requires by_id or by_column_and_value"
            )
        return params

    async def _get_table(
        self,
        table: str,
        raw_row: type[Any],
        row_type: type[Any],
        options: tuple[QueryOption, ...],
        timeout: float | None,
    ) -> GtfsTable[Any]:
        params = self.build_params(table, options)
        effective_timeout = timeout if timeout is not None else self._connection.request_timeout

        fetch = self._http_client.fetch(GTFS, params, "GET")
        if effective_timeout is None:
            body = await fetch
        else:
            body = await asyncio.wait_for(fetch, effective_timeout)

        raw = decode_json_table(body, RawGtfsResponse[raw_row])
        return ResponseCooker.cook_gtfs_table(raw, row_type)

    async def get_agency(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsAgency]:
        return await self._get_table(TABLE_AGENCY, RawGtfsAgency, GtfsAgency, options, timeout)

    async def get_calendar(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsCalendar]:
        return await self._get_table(
            TABLE_CALENDAR, RawGtfsCalendar, GtfsCalendar, options, timeout
        )

    async def get_calendar_dates(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsCalendarDate]:
        return await self._get_table(
            TABLE_CALENDAR_DATES, RawGtfsCalendarDate, GtfsCalendarDate, options, timeout
        )

    async def get_routes(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsRoute]:
        return await self._get_table(TABLE_ROUTES, RawGtfsRoute, GtfsRoute, options, timeout)

    async def get_stops(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsStop]:
        """Get stops matching an id or column/value selector."""
        return await self._get_table(TABLE_STOPS, RawGtfsStop, GtfsStop, options, timeout)

    async def get_stop_times(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsStopTime]:
        """Get stop times matching an id or column/value selector."""
        return await self._get_table(
            TABLE_STOP_TIMES, RawGtfsStopTime, GtfsStopTime, options, timeout
        )

    async def get_trips(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsTrip]:
        """Get trips matching an id or column/value selector."""
        return await self._get_table(TABLE_TRIPS, RawGtfsTrip, GtfsTrip, options, timeout)

    async def get_table(
        self, table: str, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[Any]:
        """Get any supported table by name."""
        try:
            raw_row, row_type = _TABLES[table]
        except KeyError as e:
            raise ConfigurationError(
                f"unknown table {table!r}, expected one of {', '.join(_TABLES)}"
            ) from e
        return await self._get_table(table, raw_row, row_type, options, timeout)


_TABLES: dict[str, tuple[type[Any], type[Any]]] = {
    TABLE_AGENCY: (RawGtfsAgency, GtfsAgency),
    TABLE_CALENDAR: (RawGtfsCalendar, GtfsCalendar),
    TABLE_CALENDAR_DATES: (RawGtfsCalendarDate, GtfsCalendarDate),
    TABLE_ROUTES: (RawGtfsRoute, GtfsRoute),
    TABLE_STOPS: (RawGtfsStop, GtfsStop),
    TABLE_STOP_TIMES: (RawGtfsStopTime, GtfsStopTime),
    TABLE_TRIPS: (RawGtfsTrip, GtfsTrip),
}

TABLE_NAMES = tuple(_TABLES)
