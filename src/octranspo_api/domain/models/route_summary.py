"""Route summary domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """A route serving a stop, as listed by GetRouteSummaryForStop."""

    route_no: str
    direction_id: str
    direction: str
    route_heading: str


@dataclass(frozen=True)
class RouteSummaryForStop:
    """Routes serving a stop."""

    stop_no: str
    stop_description: str
    error: str  # Informational text passed through from the feed
    routes: tuple[Route, ...] = ()
