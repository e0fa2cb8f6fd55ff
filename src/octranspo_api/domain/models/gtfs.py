"""GTFS schedule table domain models.

The tabular feed sends every column as a string, so every field here stays
text. Interpreting flag columns (weekdays, pickup/drop-off types, ...) is left
to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class GtfsQueryEcho:
    """The query parameters the feed echoes back with each table."""

    table: str
    direction: str
    column: str
    value: str
    format: str


@dataclass(frozen=True)
class GtfsTable(Generic[RowT]):
    """Rows returned for one table query, in wire order."""

    query: GtfsQueryEcho
    rows: tuple[RowT, ...] = ()


@dataclass(frozen=True)
class GtfsAgency:
    id: str
    agency_name: str
    agency_url: str
    agency_timezone: str
    agency_lang: str
    agency_phone: str


@dataclass(frozen=True)
class GtfsCalendar:
    id: str
    service_id: str
    monday: str
    tuesday: str
    wednesday: str
    thursday: str
    friday: str
    saturday: str
    sunday: str
    start_date: str
    end_date: str


@dataclass(frozen=True)
class GtfsCalendarDate:
    id: str
    service_id: str
    date: str
    exception_type: str


@dataclass(frozen=True)
class GtfsRoute:
    id: str
    route_id: str
    route_short_name: str
    route_long_name: str
    route_desc: str
    route_type: str


@dataclass(frozen=True)
class GtfsStop:
    id: str
    stop_id: str
    stop_code: str
    stop_name: str
    stop_desc: str
    stop_lat: str
    stop_lon: str
    zone_id: str
    stop_url: str
    location_type: str
    parent_station: str


@dataclass(frozen=True)
class GtfsStopTime:
    id: str
    trip_id: str
    arrival_time: str
    departure_time: str
    stop_id: str
    stop_sequence: str
    pickup_type: str
    drop_off_type: str


@dataclass(frozen=True)
class GtfsTrip:
    id: str
    route_id: str
    service_id: str
    trip_id: str
    trip_headsign: str
    direction_id: str
    block_id: str
