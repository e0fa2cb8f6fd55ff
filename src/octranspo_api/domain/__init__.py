"""Domain layer - models, errors and ports."""

from octranspo_api.domain.errors import (
    ApiError,
    ApiErrorCode,
    ConfigurationError,
    DecodeError,
    FieldParseError,
    OCTranspoError,
    TransportError,
)
from octranspo_api.domain.models import (
    NextTripsForStop,
    NextTripsForStopAllRoutes,
    OptionalScalar,
    Route,
    RouteDirection,
    RouteSummaryForStop,
    RouteWithTrips,
    Trip,
)
from octranspo_api.domain.ports import GtfsRepository, LiveFeedRepository

__all__ = [
    "ApiError",
    "ApiErrorCode",
    "ConfigurationError",
    "DecodeError",
    "FieldParseError",
    "GtfsRepository",
    "LiveFeedRepository",
    "NextTripsForStop",
    "NextTripsForStopAllRoutes",
    "OCTranspoError",
    "OptionalScalar",
    "Route",
    "RouteDirection",
    "RouteSummaryForStop",
    "RouteWithTrips",
    "TransportError",
    "Trip",
]
