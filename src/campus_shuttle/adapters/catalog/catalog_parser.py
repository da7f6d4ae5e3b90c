"""Parse raw catalog records into domain models.

Records come from TOML tables or JSON API responses. Routes reference their
stops in one of three ways, checked in this order:

- ``stops``: list of stop objects or stop ids, in travel order
- ``stop_ids``: list of stop ids, in travel order
- rows of a separate ``route_stops`` list with ``route_id``, ``stop_id`` and
  ``stop_order``
"""

import logging
from collections.abc import Iterable
from typing import Any

from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.models.error_details import CatalogError
from campus_shuttle.domain.models.route import Route
from campus_shuttle.domain.models.stop import Stop
from campus_shuttle.domain.models.transfer_point import TransferPoint

logger = logging.getLogger(__name__)


def _parse_coordinate(value: Any, field_name: str, stop_id: str) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        logger.warning(f"Stop {stop_id} has invalid {field_name} {value!r}; treating as unknown")
        return None


def _parse_minutes(value: Any, field_name: str, record_id: str) -> int:
    try:
        minutes = int(value)
    except (ValueError, TypeError) as e:
        raise CatalogError(f"{record_id}: {field_name} must be a whole number of minutes") from e
    if minutes < 0:
        raise CatalogError(f"{record_id}: {field_name} must not be negative")
    return minutes


def _as_records(data: Any, section: str) -> list[dict[str, Any]]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise CatalogError(f"Catalog '{section}' must be a list")
    return [record for record in data if isinstance(record, dict)]


def parse_stop(data: dict[str, Any]) -> Stop | None:
    """Parse one stop record, returning None when it has no id."""
    stop_id = data.get("id")
    if stop_id is None or stop_id == "":
        logger.warning(f"Skipping stop without id: {data}")
        return None
    stop_id = str(stop_id)
    name = data.get("name") or stop_id
    return Stop(
        id=stop_id,
        name=str(name),
        latitude=_parse_coordinate(data.get("latitude"), "latitude", stop_id),
        longitude=_parse_coordinate(data.get("longitude"), "longitude", stop_id),
    )


def parse_transfer_point(data: dict[str, Any]) -> TransferPoint | None:
    """Parse one transfer point record, returning None when it is incomplete."""
    transfer_id = data.get("id")
    stop_id = data.get("stop_id")
    if not transfer_id or not stop_id:
        logger.warning(f"Skipping transfer point without id or stop_id: {data}")
        return None
    transfer_id = str(transfer_id)
    return TransferPoint(
        id=transfer_id,
        stop_id=str(stop_id),
        name=str(data.get("name") or transfer_id),
        wait_time=_parse_minutes(data.get("wait_time", 0), "wait_time", transfer_id),
    )


class CatalogParser:
    """Builds a RouteCatalog from plain dictionaries."""

    def parse(
        self,
        stops: Any,
        routes: Any,
        transfer_points: Any = None,
        route_stops: Any = None,
    ) -> RouteCatalog:
        """Parse catalog sections into a validated snapshot.

        Raises:
            CatalogError: If a section has the wrong shape, a route references
                an unknown stop, or a catalog invariant is violated.
        """
        parsed_stops: list[Stop] = []
        for record in _as_records(stops, "stops"):
            stop = parse_stop(record)
            if stop is not None:
                parsed_stops.append(stop)
        stops_by_id = {stop.id: stop for stop in parsed_stops}

        ordered_route_stops = self._group_route_stops(_as_records(route_stops, "route_stops"))

        parsed_routes: list[Route] = []
        for record in _as_records(routes, "routes"):
            route = self._parse_route(record, stops_by_id, ordered_route_stops)
            if route is not None:
                parsed_routes.append(route)

        parsed_transfer_points = [
            transfer_point
            for transfer_point in (
                parse_transfer_point(record)
                for record in _as_records(transfer_points, "transfer_points")
            )
            if transfer_point is not None
        ]

        catalog = RouteCatalog(
            stops=tuple(parsed_stops),
            routes=tuple(parsed_routes),
            transfer_points=tuple(parsed_transfer_points),
        )
        logger.debug(
            f"Parsed catalog with {len(catalog.stops)} stop(s), {len(catalog.routes)} route(s), "
            f"{len(catalog.transfer_points)} transfer point(s)"
        )
        return catalog

    def parse_document(self, data: dict[str, Any]) -> RouteCatalog:
        """Parse a single document holding all catalog sections."""
        return self.parse(
            stops=data.get("stops", []),
            routes=data.get("routes", []),
            transfer_points=data.get("transfer_points", []),
            route_stops=data.get("route_stops"),
        )

    @staticmethod
    def _group_route_stops(rows: Iterable[dict[str, Any]]) -> dict[str, list[str]]:
        grouped: dict[str, list[tuple[int, str]]] = {}
        for row in rows:
            route_id = row.get("route_id")
            stop_id = row.get("stop_id")
            if route_id is None or stop_id is None:
                continue
            order = row.get("stop_order", 0)
            try:
                order = int(order)
            except (ValueError, TypeError):
                order = 0
            grouped.setdefault(str(route_id), []).append((order, str(stop_id)))

        # Stable sort keeps row order for equal stop_order values
        return {
            route_id: [stop_id for _, stop_id in sorted(entries, key=lambda e: e[0])]
            for route_id, entries in grouped.items()
        }

    def _parse_route(
        self,
        data: dict[str, Any],
        stops_by_id: dict[str, Stop],
        route_stops: dict[str, list[str]],
    ) -> Route | None:
        route_id = data.get("id")
        if route_id is None or route_id == "":
            logger.warning(f"Skipping route without id: {data}")
            return None
        route_id = str(route_id)

        raw_stops = data.get("stops")
        if raw_stops is None:
            raw_stops = data.get("stop_ids")
        if raw_stops is None:
            raw_stops = route_stops.get(route_id, [])
        if not isinstance(raw_stops, list):
            raise CatalogError(f"Route {route_id}: stops must be a list")

        route_stop_list = [self._resolve_stop(item, route_id, stops_by_id) for item in raw_stops]

        peak_hours = data.get("peak_hours") or []
        if not isinstance(peak_hours, list):
            peak_hours = [peak_hours]

        return Route(
            id=route_id,
            name=str(data.get("name") or route_id),
            description=str(data.get("description") or ""),
            stops=tuple(route_stop_list),
            peak_hours=tuple(str(label) for label in peak_hours),
            estimated_time=_parse_minutes(
                data.get("estimated_time", 0), "estimated_time", route_id
            ),
        )

    @staticmethod
    def _resolve_stop(item: Any, route_id: str, stops_by_id: dict[str, Stop]) -> Stop:
        if isinstance(item, dict):
            embedded = parse_stop(item)
            if embedded is None:
                raise CatalogError(f"Route {route_id} has an embedded stop without id")
            return stops_by_id.get(embedded.id, embedded)

        stop = stops_by_id.get(str(item))
        if stop is None:
            raise CatalogError(f"Route {route_id} references unknown stop {item}")
        return stop
