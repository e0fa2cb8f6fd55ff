"""Wire-shaped models for OC Transpo responses.

These mirror the payloads literally, SOAP nesting and per-element namespace
noise included, and are only ever handed to the ResponseCooker. Elements or
keys the models do not know about are ignored; elements that are missing
decode as empty text, so presence is decided later, field by field.
"""

from __future__ import annotations

from typing import Annotated, Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field


def _text_of(value: Any) -> Any:
    """Collapse an element dict to its character data; null becomes empty text."""
    if value is None:
        return ""
    if isinstance(value, dict):
        return value.get("#text", "")
    return value


def _as_list(value: Any) -> Any:
    """A repeated element that occurs once decodes as a single dict."""
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return value


WireText = Annotated[str, BeforeValidator(_text_of)]

RowT = TypeVar("RowT", bound=BaseModel)


class _RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class RawTextElement(_RawModel):
    """A text element that carries its own namespace declaration."""

    text: WireText = Field(default="", alias="#text")
    xmlns: str = Field(default="", alias="@xmlns")


# ---------------------------------------------------------------------------
# Shared trip shape
# ---------------------------------------------------------------------------


class RawTrip(_RawModel):
    trip_destination: WireText = Field(default="", alias="TripDestination")
    trip_start_time: WireText = Field(default="", alias="TripStartTime")
    adjusted_schedule_time: WireText = Field(default="", alias="AdjustedScheduleTime")
    adjustment_age: WireText = Field(default="", alias="AdjustmentAge")
    last_trip_of_schedule: WireText = Field(default="", alias="LastTripOfSchedule")
    bus_type: WireText = Field(default="", alias="BusType")
    latitude: WireText = Field(default="", alias="Latitude")
    longitude: WireText = Field(default="", alias="Longitude")
    gps_speed: WireText = Field(default="", alias="GPSSpeed")


class RawTrips(_RawModel):
    trip: Annotated[list[RawTrip], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Trip"
    )


# ---------------------------------------------------------------------------
# GetRouteSummaryForStop
# ---------------------------------------------------------------------------


class RawSummaryRoute(_RawModel):
    route_no: WireText = Field(default="", alias="RouteNo")
    direction_id: WireText = Field(default="", alias="DirectionID")
    direction: WireText = Field(default="", alias="Direction")
    route_heading: WireText = Field(default="", alias="RouteHeading")


class RawSummaryRoutes(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    route: Annotated[list[RawSummaryRoute], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Route"
    )


class RawRouteSummaryResult(_RawModel):
    stop_no: RawTextElement = Field(default_factory=RawTextElement, alias="StopNo")
    stop_description: RawTextElement = Field(
        default_factory=RawTextElement, alias="StopDescription"
    )
    error: RawTextElement = Field(default_factory=RawTextElement, alias="Error")
    routes: RawSummaryRoutes = Field(default_factory=RawSummaryRoutes, alias="Routes")


class RawRouteSummaryResponse(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    result: RawRouteSummaryResult = Field(
        default_factory=RawRouteSummaryResult, alias="GetRouteSummaryForStopResult"
    )


class RawRouteSummaryBody(_RawModel):
    response: RawRouteSummaryResponse = Field(
        default_factory=RawRouteSummaryResponse, alias="GetRouteSummaryForStopResponse"
    )


class RawRouteSummaryEnvelope(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    body: RawRouteSummaryBody = Field(default_factory=RawRouteSummaryBody, alias="Body")


# ---------------------------------------------------------------------------
# GetNextTripsForStop
# ---------------------------------------------------------------------------


class RawRouteDirection(_RawModel):
    route_no: WireText = Field(default="", alias="RouteNo")
    route_label: WireText = Field(default="", alias="RouteLabel")
    direction: WireText = Field(default="", alias="Direction")
    error: WireText = Field(default="", alias="Error")
    request_processing_time: WireText = Field(default="", alias="RequestProcessingTime")
    trips: RawTrips = Field(default_factory=RawTrips, alias="Trips")


class RawNextTripsRoute(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    route_direction: Annotated[list[RawRouteDirection], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="RouteDirection"
    )


class RawNextTripsResult(_RawModel):
    stop_no: RawTextElement = Field(default_factory=RawTextElement, alias="StopNo")
    stop_label: RawTextElement = Field(default_factory=RawTextElement, alias="StopLabel")
    error: RawTextElement = Field(default_factory=RawTextElement, alias="Error")
    route: RawNextTripsRoute = Field(default_factory=RawNextTripsRoute, alias="Route")


class RawNextTripsResponse(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    result: RawNextTripsResult = Field(
        default_factory=RawNextTripsResult, alias="GetNextTripsForStopResult"
    )


class RawNextTripsBody(_RawModel):
    response: RawNextTripsResponse = Field(
        default_factory=RawNextTripsResponse, alias="GetNextTripsForStopResponse"
    )


class RawNextTripsEnvelope(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    body: RawNextTripsBody = Field(default_factory=RawNextTripsBody, alias="Body")


# ---------------------------------------------------------------------------
# GetNextTripsForStopAllRoutes
#
# The service wraps this payload in the GetRouteSummaryForStop response and
# result elements; the endpoint's own names are accepted as well.
# ---------------------------------------------------------------------------


class RawRouteWithTrips(_RawModel):
    route_no: WireText = Field(default="", alias="RouteNo")
    direction_id: WireText = Field(default="", alias="DirectionID")
    direction: WireText = Field(default="", alias="Direction")
    route_heading: WireText = Field(default="", alias="RouteHeading")
    trips: RawTrips = Field(default_factory=RawTrips, alias="Trips")


class RawRoutesWithTrips(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    route: Annotated[list[RawRouteWithTrips], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Route"
    )


class RawNextTripsAllRoutesResult(_RawModel):
    stop_no: RawTextElement = Field(default_factory=RawTextElement, alias="StopNo")
    stop_description: RawTextElement = Field(
        default_factory=RawTextElement, alias="StopDescription"
    )
    error: RawTextElement = Field(default_factory=RawTextElement, alias="Error")
    routes: RawRoutesWithTrips = Field(default_factory=RawRoutesWithTrips, alias="Routes")


class RawNextTripsAllRoutesResponse(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    result: RawNextTripsAllRoutesResult = Field(
        default_factory=RawNextTripsAllRoutesResult,
        validation_alias=AliasChoices(
            "GetRouteSummaryForStopResult", "GetNextTripsForStopAllRoutesResult"
        ),
    )


class RawNextTripsAllRoutesBody(_RawModel):
    response: RawNextTripsAllRoutesResponse = Field(
        default_factory=RawNextTripsAllRoutesResponse,
        validation_alias=AliasChoices(
            "GetRouteSummaryForStopResponse", "GetNextTripsForStopAllRoutesResponse"
        ),
    )


class RawNextTripsAllRoutesEnvelope(_RawModel):
    xmlns: str = Field(default="", alias="@xmlns")
    body: RawNextTripsAllRoutesBody = Field(
        default_factory=RawNextTripsAllRoutesBody, alias="Body"
    )


# ---------------------------------------------------------------------------
# Gtfs tables (JSON)
# ---------------------------------------------------------------------------


class RawGtfsQuery(_RawModel):
    table: WireText = ""
    direction: WireText = ""
    column: WireText = ""
    value: WireText = ""
    format: WireText = ""


class RawGtfsResponse(_RawModel, Generic[RowT]):
    query: RawGtfsQuery = Field(default_factory=RawGtfsQuery, alias="Query")
    gtfs: Annotated[list[RowT], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Gtfs"
    )


class RawGtfsAgency(_RawModel):
    id: WireText = ""
    agency_name: WireText = ""
    agency_url: WireText = ""
    agency_timezone: WireText = ""
    agency_lang: WireText = ""
    agency_phone: WireText = ""


class RawGtfsCalendar(_RawModel):
    id: WireText = ""
    service_id: WireText = ""
    monday: WireText = ""
    tuesday: WireText = ""
    wednesday: WireText = ""
    thursday: WireText = ""
    friday: WireText = ""
    saturday: WireText = ""
    sunday: WireText = ""
    start_date: WireText = ""
    end_date: WireText = ""


class RawGtfsCalendarDate(_RawModel):
    id: WireText = ""
    service_id: WireText = ""
    date: WireText = ""
    exception_type: WireText = ""


class RawGtfsRoute(_RawModel):
    id: WireText = ""
    route_id: WireText = ""
    route_short_name: WireText = ""
    route_long_name: WireText = ""
    route_desc: WireText = ""
    route_type: WireText = ""


class RawGtfsStop(_RawModel):
    id: WireText = ""
    stop_id: WireText = ""
    stop_code: WireText = ""
    stop_name: WireText = ""
    stop_desc: WireText = ""
    stop_lat: WireText = ""
    stop_lon: WireText = ""
    zone_id: WireText = ""
    stop_url: WireText = ""
    location_type: WireText = ""
    parent_station: WireText = ""


class RawGtfsStopTime(_RawModel):
    id: WireText = ""
    trip_id: WireText = ""
    arrival_time: WireText = ""
    departure_time: WireText = ""
    stop_id: WireText = ""
    stop_sequence: WireText = ""
    pickup_type: WireText = ""
    drop_off_type: WireText = ""


class RawGtfsTrip(_RawModel):
    id: WireText = ""
    route_id: WireText = ""
    service_id: WireText = ""
    trip_id: WireText = ""
    trip_headsign: WireText = ""
    direction_id: WireText = ""
    block_id: WireText = ""
