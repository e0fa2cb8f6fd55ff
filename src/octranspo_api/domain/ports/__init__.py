"""Ports (interfaces) for the ports-and-adapters architecture."""

from octranspo_api.domain.ports.gtfs_repository import GtfsRepository, QueryOption
from octranspo_api.domain.ports.live_feed_repository import LiveFeedRepository

__all__ = [
    "GtfsRepository",
    "LiveFeedRepository",
    "QueryOption",
]
