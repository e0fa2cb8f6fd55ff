"""Adapters layer - external system integrations."""

from octranspo_api.adapters.api_rate_limiter import TokenBucketRateLimiter
from octranspo_api.adapters.config import AppConfig
from octranspo_api.adapters.octranspo_api import (
    Connection,
    OcGtfsRepository,
    OcHttpClient,
    OcLiveFeedRepository,
)

__all__ = [
    "AppConfig",
    "Connection",
    "OcGtfsRepository",
    "OcHttpClient",
    "OcLiveFeedRepository",
    "TokenBucketRateLimiter",
]
