"""Options for GTFS table queries.

Each option validates its argument when it is created, so a bad option fails
before any request is sent:

    await repository.get_stops(by_column_and_value("stop_code", "3017"), limit(5))
"""

from octranspo_api.adapters.octranspo_api.constants import SORT_DIRECTIONS
from octranspo_api.domain.errors import ConfigurationError
from octranspo_api.domain.ports.gtfs_repository import QueryOption


def by_id(row_id: str) -> QueryOption:
    """Select the row with the given ``id``."""
    if not row_id:
        raise ConfigurationError("id must not be empty")

    def apply(params: dict[str, str]) -> None:
        params["id"] = row_id

    return apply


def by_column_and_value(column: str, value: str) -> QueryOption:
    """Select rows whose ``column`` equals ``value``."""
    if not column:
        raise ConfigurationError("column must not be empty")

    def apply(params: dict[str, str]) -> None:
        params["column"] = column
        params["value"] = value

    return apply


def order_by(direction: str) -> QueryOption:
    """Sort rows ascending ("asc") or descending ("desc")."""
    if direction not in SORT_DIRECTIONS:
        raise ConfigurationError(
            f"order direction must be one of {', '.join(SORT_DIRECTIONS)}, got {direction!r}"
        )

    def apply(params: dict[str, str]) -> None:
        params["orderBy"] = direction

    return apply


def limit(count: int) -> QueryOption:
    """Return at most ``count`` rows."""
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ConfigurationError(f"limit must be a positive integer, got {count!r}")

    def apply(params: dict[str, str]) -> None:
        params["limit"] = str(count)

    return apply
