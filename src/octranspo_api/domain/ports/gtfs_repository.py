"""GTFS schedule repository port."""

from collections.abc import Callable
from typing import Protocol

from octranspo_api.domain.models.gtfs import (
    GtfsAgency,
    GtfsCalendar,
    GtfsCalendarDate,
    GtfsRoute,
    GtfsStop,
    GtfsStopTime,
    GtfsTable,
    GtfsTrip,
)

# Mutates the outgoing query parameters of a table request.
QueryOption = Callable[[dict[str, str]], None]


class GtfsRepository(Protocol):
    """Port for the static GTFS schedule tables."""

    async def get_agency(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsAgency]:
        ...

    async def get_calendar(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsCalendar]:
        ...

    async def get_calendar_dates(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsCalendarDate]:
        ...

    async def get_routes(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsRoute]:
        ...

    async def get_stops(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsStop]:
        """Get stops. Requires an id or column/value selector."""
        ...

    async def get_stop_times(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsStopTime]:
        """Get stop times. Requires an id or column/value selector."""
        ...

    async def get_trips(
        self, *options: QueryOption, timeout: float | None = None
    ) -> GtfsTable[GtfsTrip]:
        """Get trips. Requires an id or column/value selector."""
        ...
