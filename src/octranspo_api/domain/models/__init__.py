"""Domain models for OC Transpo feeds."""

from octranspo_api.domain.models.gtfs import (
    GtfsAgency,
    GtfsCalendar,
    GtfsCalendarDate,
    GtfsQueryEcho,
    GtfsRoute,
    GtfsStop,
    GtfsStopTime,
    GtfsTable,
    GtfsTrip,
)
from octranspo_api.domain.models.next_trips import (
    NextTripsForStop,
    NextTripsForStopAllRoutes,
    RouteDirection,
    RouteWithTrips,
)
from octranspo_api.domain.models.optional_scalar import OptionalScalar
from octranspo_api.domain.models.route_summary import Route, RouteSummaryForStop
from octranspo_api.domain.models.trip import Trip

__all__ = [
    "GtfsAgency",
    "GtfsCalendar",
    "GtfsCalendarDate",
    "GtfsQueryEcho",
    "GtfsRoute",
    "GtfsStop",
    "GtfsStopTime",
    "GtfsTable",
    "GtfsTrip",
    "NextTripsForStop",
    "NextTripsForStopAllRoutes",
    "OptionalScalar",
    "Route",
    "RouteDirection",
    "RouteSummaryForStop",
    "RouteWithTrips",
    "Trip",
]
