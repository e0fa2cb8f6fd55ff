"""OC Transpo API adapter."""

from octranspo_api.adapters.octranspo_api.connection import Connection
from octranspo_api.adapters.octranspo_api.gtfs_repository import OcGtfsRepository
from octranspo_api.adapters.octranspo_api.http_client import OcHttpClient
from octranspo_api.adapters.octranspo_api.live_feed_repository import OcLiveFeedRepository
from octranspo_api.adapters.octranspo_api.query_options import (
    by_column_and_value,
    by_id,
    limit,
    order_by,
)
from octranspo_api.adapters.octranspo_api.response_cooker import ResponseCooker

__all__ = [
    "Connection",
    "OcGtfsRepository",
    "OcHttpClient",
    "OcLiveFeedRepository",
    "ResponseCooker",
    "by_column_and_value",
    "by_id",
    "limit",
    "order_by",
]
