"""Live feed repository port."""

from typing import Protocol

from octranspo_api.domain.models.next_trips import (
    NextTripsForStop,
    NextTripsForStopAllRoutes,
)
from octranspo_api.domain.models.route_summary import RouteSummaryForStop


class LiveFeedRepository(Protocol):
    """Port for real-time stop and trip predictions."""

    async def get_route_summary_for_stop(
        self, stop_no: str, timeout: float | None = None
    ) -> RouteSummaryForStop:
        """Get the routes serving a stop."""
        ...

    async def get_next_trips_for_stop(
        self, route_no: str, stop_no: str, timeout: float | None = None
    ) -> NextTripsForStop:
        """Get the next trips for one route at a stop."""
        ...

    async def get_next_trips_for_stop_all_routes(
        self, stop_no: str, timeout: float | None = None
    ) -> NextTripsForStopAllRoutes:
        """Get the next trips for every route at a stop."""
        ...
