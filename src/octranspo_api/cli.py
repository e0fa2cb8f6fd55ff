"""Command line client for the OC Transpo API."""

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from datetime import datetime
from typing import Any

from octranspo_api.adapters.api_rate_limiter import TokenBucketRateLimiter
from octranspo_api.adapters.config import AppConfig
from octranspo_api.adapters.octranspo_api import (
    Connection,
    OcGtfsRepository,
    OcLiveFeedRepository,
)
from octranspo_api.adapters.octranspo_api.constants import API_NAME
from octranspo_api.adapters.octranspo_api.gtfs_repository import TABLE_NAMES
from octranspo_api.adapters.octranspo_api.query_options import (
    by_column_and_value,
    by_id,
    limit,
    order_by,
)
from octranspo_api.domain.models import (
    GtfsTable,
    NextTripsForStop,
    NextTripsForStopAllRoutes,
    RouteSummaryForStop,
    Trip,
)
from octranspo_api.domain.ports import QueryOption

logger = logging.getLogger(__name__)

# Command line use defaults to one request per second, bursts of one
DEFAULT_CLI_RATE = 1.0
DEFAULT_CLI_BURST = 1


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serialize a domain value as indented JSON."""
    return json.dumps(
        dataclasses.asdict(value), indent=2, ensure_ascii=False, default=_json_default
    )


def _format_trip(trip: Trip) -> str:
    return (
        f"    {trip.adjusted_schedule_time} ({trip.adjustment_age} minutes old), "
        f"{trip.trip_destination}"
    )


def format_route_summary(summary: RouteSummaryForStop) -> str:
    lines = [f'Stop {summary.stop_no}, "{summary.stop_description}":']
    for route in summary.routes:
        lines.append(f'  Route {route.route_no}, "{route.route_heading}", going {route.direction}')
    return "\n".join(lines)


def format_next_trips(next_trips: NextTripsForStop) -> str:
    lines = [f'Stop {next_trips.stop_no}, "{next_trips.stop_label}":']
    for direction in next_trips.route_directions:
        lines.append(
            f'  Route {direction.route_no}, "{direction.route_label}", going {direction.direction}'
            f" (as of {direction.request_processing_time:%Y-%m-%d %H:%M:%S %Z}):"
        )
        lines.extend(_format_trip(trip) for trip in direction.trips)
    return "\n".join(lines)


def format_next_trips_all_routes(next_trips: NextTripsForStopAllRoutes) -> str:
    lines = [f'Stop {next_trips.stop_no}, "{next_trips.stop_description}":']
    for route in next_trips.routes:
        lines.append(f'  Route {route.route_no}, "{route.route_heading}", going {route.direction}:')
        lines.extend(_format_trip(trip) for trip in route.trips)
    return "\n".join(lines)


def format_gtfs_table(table: GtfsTable[Any]) -> str:
    """Format table rows as tab-separated columns with a header line."""
    if not table.rows:
        return f"No {table.query.table or 'table'} rows found."
    columns = [field.name for field in dataclasses.fields(table.rows[0])]
    lines = ["\t".join(columns)]
    for row in table.rows:
        lines.append("\t".join(getattr(row, column) for column in columns))
    return "\n".join(lines)


def build_query_options(args: argparse.Namespace) -> list[QueryOption]:
    """Translate gtfs subcommand flags into query options."""
    options: list[QueryOption] = []
    if args.id is not None:
        options.append(by_id(args.id))
    if args.column is not None or args.value is not None:
        if args.column is None or args.value is None:
            raise ValueError("--column and --value must be given together")
        options.append(by_column_and_value(args.column, args.value))
    if args.order is not None:
        options.append(order_by(args.order))
    if args.limit is not None:
        options.append(limit(args.limit))
    return options


async def run_command(args: argparse.Namespace, connection: Connection) -> str:
    """Run the selected subcommand and return its output text."""
    timeout = args.timeout

    if args.command == "summary":
        summary = await OcLiveFeedRepository(connection).get_route_summary_for_stop(
            args.stop_no, timeout=timeout
        )
        return to_json(summary) if args.json else format_route_summary(summary)

    if args.command == "next-trips":
        live_feed = OcLiveFeedRepository(connection)
        if args.route:
            next_trips = await live_feed.get_next_trips_for_stop(
                args.route, args.stop_no, timeout=timeout
            )
            return to_json(next_trips) if args.json else format_next_trips(next_trips)
        all_routes = await live_feed.get_next_trips_for_stop_all_routes(
            args.stop_no, timeout=timeout
        )
        return to_json(all_routes) if args.json else format_next_trips_all_routes(all_routes)

    if args.command == "gtfs":
        options = build_query_options(args)
        table = await OcGtfsRepository(connection).get_table(args.table, *options, timeout=timeout)
        return to_json(table) if args.json else format_gtfs_table(table)

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="octranspo-api",
        description="OC Transpo real-time and GTFS data client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Routes serving a stop
  octranspo-api summary 7659

  # Next trips for route 6 at a stop
  octranspo-api next-trips 7659 --route 6

  # Next trips for every route at a stop
  octranspo-api next-trips 7659

  # Stop times for a stop, newest first
  octranspo-api gtfs stop_times --column stop_id --value 7659 --order desc --limit 10

Credentials are read from OCTRANSPO_APP_ID and OCTRANSPO_API_KEY (or .env)
unless --id and --key are given.
        """,
    )
    parser.add_argument("--id", dest="app_id", help="Application ID (appID)")
    parser.add_argument("--key", dest="api_key", help="API key (apiKey)")
    parser.add_argument(
        "--timeout", type=float, default=None, help="Seconds allowed per request"
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=DEFAULT_CLI_RATE,
        help=f"Requests per second (default {DEFAULT_CLI_RATE:g})",
    )
    parser.add_argument(
        "--burst",
        type=int,
        default=DEFAULT_CLI_BURST,
        help=f"Requests allowed back to back (default {DEFAULT_CLI_BURST})",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    summary_parser = subparsers.add_parser("summary", help="Show the routes serving a stop")
    summary_parser.add_argument("stop_no", help="Stop number (e.g., 7659)")

    trips_parser = subparsers.add_parser("next-trips", help="Show the next trips at a stop")
    trips_parser.add_argument("stop_no", help="Stop number (e.g., 7659)")
    trips_parser.add_argument(
        "--route", help="Route number; all routes at the stop when omitted"
    )

    gtfs_parser = subparsers.add_parser("gtfs", help="Query a GTFS schedule table")
    gtfs_parser.add_argument("table", choices=TABLE_NAMES, help="Table name")
    gtfs_parser.add_argument("--id", dest="id", help="Row id")
    gtfs_parser.add_argument("--column", help="Column to match")
    gtfs_parser.add_argument("--value", help="Value the column must equal")
    gtfs_parser.add_argument("--order", help="Sort direction (asc or desc)")
    gtfs_parser.add_argument("--limit", type=int, help="Maximum number of rows")

    return parser


def create_connection(args: argparse.Namespace, config: AppConfig) -> Connection:
    """Create a rate-limited connection from flags, falling back to config.

    Raises:
        ValueError: If no application ID or API key is available.
    """
    overrides = {
        "octranspo_app_id": args.app_id,
        "octranspo_api_key": args.api_key,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v})
    if not config.has_credentials():
        missing = "appID" if not config.octranspo_app_id else "apiKey"
        raise ValueError(f"An {missing} for the OC Transpo API is required.")

    limiter = TokenBucketRateLimiter(API_NAME, rate_per_second=args.rate, burst=args.burst)
    return Connection(
        config.octranspo_app_id,
        config.octranspo_api_key,
        rate_limiter=limiter,
        base_url=config.octranspo_api_url,
        request_timeout=config.request_timeout_seconds,
    )


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        connection = create_connection(args, AppConfig())
        async with connection:
            print(await run_command(args, connection))
    except TimeoutError:
        print("Error: request timed out", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nCanceled.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
