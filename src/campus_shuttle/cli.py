"""Command line front end for campus shuttle route discovery."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Any

from campus_shuttle.adapters.catalog import HttpCatalogRepository, TomlCatalogRepository
from campus_shuttle.adapters.config import AppConfig
from campus_shuttle.application.services import (
    RouteDiscoveryService,
    TripPlanningService,
    create_transfer_search,
    find_nearest_stops,
    points_for_duration,
)
from campus_shuttle.domain.geodesic import leg_distances, path_distance
from campus_shuttle.domain.models import (
    CatalogError,
    DirectionPolicy,
    Itinerary,
    RouteCatalog,
    TransferSearchKind,
    TripPlan,
)
from campus_shuttle.domain.ports import CatalogRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_catalog_repository(config: AppConfig) -> CatalogRepository:
    """Create the catalog repository selected by configuration."""
    if config.catalog_source == "http":
        return HttpCatalogRepository(config)
    return TomlCatalogRepository(config)


def create_discovery_service(config: AppConfig) -> RouteDiscoveryService:
    """Create a discovery engine from the configured policies."""
    return RouteDiscoveryService(
        transfer_search=create_transfer_search(config.transfer_search_kind, config.duration),
        direction_policy=config.direction,
        duration_policy=config.duration,
    )


def _format_km(value: float | None) -> str:
    return f"{value:.2f} km" if value is not None else "unknown"


def itinerary_to_dict(itinerary: Itinerary, minutes_per_point: int) -> dict[str, Any]:
    """Serializable summary of an itinerary."""
    result: dict[str, Any] = {
        "kind": itinerary.kind.value,
        "name": itinerary.name,
        "description": itinerary.description,
        "route_id": itinerary.route.id,
        "stops": [stop.id for stop in itinerary.stops],
        "distance_km": itinerary.distance_km,
        "leg_distances_km": list(itinerary.leg_distances_km),
        "duration_minutes": itinerary.duration_minutes,
        "points": points_for_duration(itinerary.duration_minutes, minutes_per_point),
        "peak_hours": list(itinerary.peak_hours),
    }
    if itinerary.is_transfer:
        result["second_route_id"] = itinerary.second_route.id if itinerary.second_route else None
        result["transfer_stop_id"] = (
            itinerary.transfer_stop.id if itinerary.transfer_stop else None
        )
        result["transfer_point_id"] = (
            itinerary.transfer_point.id if itinerary.transfer_point else None
        )
        result["wait_time_minutes"] = itinerary.wait_time_minutes
    return result


def format_itinerary(itinerary: Itinerary, position: int, minutes_per_point: int) -> str:
    """Human readable block describing one itinerary option."""
    points = points_for_duration(itinerary.duration_minutes, minutes_per_point)
    lines = [
        f"  [{position}] {itinerary.name}"
        + (f" ({itinerary.description})" if itinerary.description else ""),
        f"      {_format_km(itinerary.distance_km)}, {itinerary.duration_minutes} mins, "
        f"{points} point(s)",
    ]
    if itinerary.wait_time_minutes:
        lines.append(f"      includes {itinerary.wait_time_minutes} mins transfer wait")
    if itinerary.peak_hours:
        lines.append(f"      Peak hours: {', '.join(itinerary.peak_hours)}")
    stop_names = []
    for stop in itinerary.stops:
        marker = " *" if itinerary.transfer_stop and stop.id == itinerary.transfer_stop.id else ""
        stop_names.append(f"{stop.name}{marker}")
    lines.append(f"      Stops: {' -> '.join(stop_names)}")
    return "\n".join(lines)


def print_plan(plan: TripPlan, minutes_per_point: int, format_json: bool = False) -> None:
    """Print a trip plan as text or JSON."""
    if format_json:
        print(
            json.dumps(
                {
                    "origin": plan.origin_stop_id,
                    "destination": plan.destination_stop_id,
                    "outcome": plan.outcome.value,
                    "reason": plan.reason,
                    "itineraries": [
                        itinerary_to_dict(i, minutes_per_point) for i in plan.itineraries
                    ],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    if not plan.itineraries:
        print(plan.reason or "No routes available", file=sys.stderr)
        return

    print(f"\nFound {len(plan.itineraries)} option(s):\n")
    for position, itinerary in enumerate(plan.itineraries):
        print(format_itinerary(itinerary, position, minutes_per_point))
        print()


def show_stops(catalog: RouteCatalog, format_json: bool = False) -> None:
    if format_json:
        print(
            json.dumps(
                [
                    {
                        "id": s.id,
                        "name": s.name,
                        "latitude": s.latitude,
                        "longitude": s.longitude,
                    }
                    for s in catalog.stops
                ],
                indent=2,
                ensure_ascii=False,
            )
        )
        return
    print(f"\nStops: {len(catalog.stops)}")
    for stop in catalog.stops:
        position = (
            f"{stop.latitude:.4f}, {stop.longitude:.4f}"
            if stop.has_coordinates
            else "no coordinates"
        )
        print(f"  {stop.id}: {stop.name} ({position})")


def show_routes(catalog: RouteCatalog, format_json: bool = False) -> None:
    """Print every route with its stops and distance to the next stop."""
    if format_json:
        print(
            json.dumps(
                [
                    {
                        "id": r.id,
                        "name": r.name,
                        "description": r.description,
                        "estimated_time": r.estimated_time,
                        "peak_hours": list(r.peak_hours),
                        "stops": list(r.stop_ids),
                        "leg_distances_km": leg_distances(r.stops),
                        "distance_km": path_distance(r.stops),
                    }
                    for r in catalog.routes
                ],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    for route in catalog.routes:
        print(f"\n{route.name} ({route.id})")
        if route.description:
            print(f"  {route.description}")
        print(
            f"  {route.estimated_time} mins, {_format_km(path_distance(route.stops))} total"
        )
        if route.peak_hours:
            print(f"  Peak Hours: {', '.join(route.peak_hours)}")
        legs = leg_distances(route.stops)
        for index, stop in enumerate(route.stops):
            suffix = f"  ({_format_km(legs[index])} to next stop)" if index < len(legs) else ""
            print(f"    {stop.name}{suffix}")


def _apply_policy_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # Applied after loading the catalog so flags win over its [settings] table
    if getattr(args, "transfer_search", None):
        config.transfer_search = TransferSearchKind(args.transfer_search).value
    if getattr(args, "forward_only", False):
        config.direction_policy = DirectionPolicy.FORWARD_ONLY.value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Campus shuttle route discovery",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List stops and routes
  campus-shuttle stops
  campus-shuttle routes

  # Plan a trip between two stops
  campus-shuttle plan main-gate library

  # Fastest trip through a registered transfer point
  campus-shuttle optimal main-gate hostel-c

  # Stops closest to a position
  campus-shuttle nearby 28.4506 77.5842

  # Print the booking payload for the second option
  campus-shuttle book main-gate library --option 1
        """,
    )
    parser.add_argument("--config-file", help="Catalog TOML file (overrides CATALOG_FILE)")
    parser.add_argument(
        "--transfer-search",
        choices=[kind.value for kind in TransferSearchKind],
        help="Transfer search strategy",
    )
    parser.add_argument(
        "--forward-only",
        action="store_true",
        help="Only ride routes in their native stop order",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    stops_parser = subparsers.add_parser("stops", help="List stops")
    stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    routes_parser = subparsers.add_parser("routes", help="List routes with leg distances")
    routes_parser.add_argument("--json", action="store_true", help="Output as JSON")

    plan_parser = subparsers.add_parser("plan", help="Plan a trip between two stops")
    plan_parser.add_argument("origin", help="Origin stop ID")
    plan_parser.add_argument("destination", help="Destination stop ID")
    plan_parser.add_argument("--json", action="store_true", help="Output as JSON")

    optimal_parser = subparsers.add_parser(
        "optimal", help="Fastest trip through a registered transfer point"
    )
    optimal_parser.add_argument("origin", help="Origin stop ID")
    optimal_parser.add_argument("destination", help="Destination stop ID")
    optimal_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearby_parser = subparsers.add_parser("nearby", help="Stops closest to a position")
    nearby_parser.add_argument("latitude", type=float, help="Latitude in degrees")
    nearby_parser.add_argument("longitude", type=float, help="Longitude in degrees")
    nearby_parser.add_argument("--limit", type=int, help="Number of stops to list")
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    book_parser = subparsers.add_parser("book", help="Print the booking payload for an option")
    book_parser.add_argument("origin", help="Origin stop ID")
    book_parser.add_argument("destination", help="Destination stop ID")
    book_parser.add_argument("--option", type=int, default=0, help="Option number from 'plan'")
    book_parser.add_argument(
        "--scheduled-time", help="Departure time in ISO format (e.g. 2024-05-01T08:30)"
    )

    return parser


async def run_command(args: argparse.Namespace, config: AppConfig) -> int:
    """Execute a parsed command and return the process exit code."""
    repository = create_catalog_repository(config)
    catalog = await repository.fetch_catalog()
    _apply_policy_overrides(config, args)
    discovery_service = create_discovery_service(config)
    planner = TripPlanningService(repository, discovery_service)

    if args.command == "stops":
        show_stops(catalog, format_json=args.json)

    elif args.command == "routes":
        show_routes(catalog, format_json=args.json)

    elif args.command == "plan":
        plan = planner.plan_with_catalog(catalog, args.origin, args.destination)
        print_plan(plan, config.minutes_per_point, format_json=args.json)
        if not plan.itineraries:
            return 1

    elif args.command == "optimal":
        itinerary = discovery_service.find_optimal_transfer(
            catalog, args.origin, args.destination
        )
        if itinerary is None:
            print(
                f"No transfer route via a registered transfer point from {args.origin} "
                f"to {args.destination}",
                file=sys.stderr,
            )
            return 1
        if args.json:
            print(
                json.dumps(
                    itinerary_to_dict(itinerary, config.minutes_per_point),
                    indent=2,
                    ensure_ascii=False,
                )
            )
        else:
            print(format_itinerary(itinerary, 0, config.minutes_per_point))

    elif args.command == "nearby":
        limit = args.limit if args.limit is not None else config.nearby_stop_limit
        nearest = find_nearest_stops(catalog.stops, args.latitude, args.longitude, limit)
        if args.json:
            print(
                json.dumps(
                    [
                        {"id": n.stop.id, "name": n.stop.name, "distance_km": n.distance_km}
                        for n in nearest
                    ],
                    indent=2,
                    ensure_ascii=False,
                )
            )
        else:
            for n in nearest:
                print(f"  {n.stop.name} ({n.stop.id}): {_format_km(n.distance_km)}")

    elif args.command == "book":
        plan = planner.plan_with_catalog(catalog, args.origin, args.destination)
        if not plan.itineraries:
            print(plan.reason or "No routes available", file=sys.stderr)
            return 1
        scheduled_time = (
            datetime.fromisoformat(args.scheduled_time) if args.scheduled_time else None
        )
        booking = planner.build_booking(
            plan, args.option, config.minutes_per_point, scheduled_time
        )
        print(booking.model_dump_json(indent=2, exclude_none=True))

    return 0


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    configure_logging(config.log_level)

    if args.config_file:
        config.catalog_file = args.config_file

    try:
        return await run_command(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except (CatalogError, FileNotFoundError, IndexError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
