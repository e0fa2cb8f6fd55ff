"""Client for the OC Transpo real-time and GTFS data feeds."""

from octranspo_api.adapters import (
    AppConfig,
    Connection,
    OcGtfsRepository,
    OcLiveFeedRepository,
    TokenBucketRateLimiter,
)
from octranspo_api.adapters.octranspo_api.query_options import (
    by_column_and_value,
    by_id,
    limit,
    order_by,
)
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
    GtfsTable,
    NextTripsForStop,
    NextTripsForStopAllRoutes,
    OptionalScalar,
    Route,
    RouteDirection,
    RouteSummaryForStop,
    RouteWithTrips,
    Trip,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApiErrorCode",
    "AppConfig",
    "ConfigurationError",
    "Connection",
    "DecodeError",
    "FieldParseError",
    "GtfsTable",
    "NextTripsForStop",
    "NextTripsForStopAllRoutes",
    "OCTranspoError",
    "OcGtfsRepository",
    "OcLiveFeedRepository",
    "OptionalScalar",
    "Route",
    "RouteDirection",
    "RouteSummaryForStop",
    "RouteWithTrips",
    "TokenBucketRateLimiter",
    "TransportError",
    "Trip",
    "by_column_and_value",
    "by_id",
    "limit",
    "order_by",
]
