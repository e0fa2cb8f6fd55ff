"""Next trips domain models."""

from dataclasses import dataclass
from datetime import datetime

from octranspo_api.domain.models.trip import Trip


@dataclass(frozen=True)
class RouteDirection:
    """One direction of travel along one route, with its next trips."""

    route_no: str
    route_label: str
    direction: str
    error: str
    request_processing_time: datetime  # Aware, in the agency's local zone
    trips: tuple[Trip, ...] = ()


@dataclass(frozen=True)
class NextTripsForStop:
    """Next trips for one route at a stop, grouped by route direction."""

    stop_no: str
    stop_label: str
    error: str
    route_directions: tuple[RouteDirection, ...] = ()


@dataclass(frozen=True)
class RouteWithTrips:
    """A route serving a stop together with its next trips."""

    route_no: str
    direction_id: str
    direction: str
    route_heading: str
    trips: tuple[Trip, ...] = ()


@dataclass(frozen=True)
class NextTripsForStopAllRoutes:
    """Next trips for every route serving a stop."""

    stop_no: str
    stop_description: str
    error: str
    routes: tuple[RouteWithTrips, ...] = ()
