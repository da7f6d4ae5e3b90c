"""Route catalog domain model."""

from dataclasses import dataclass, field

from .error_details import CatalogError
from .route import Route
from .stop import Stop
from .transfer_point import TransferPoint


@dataclass(frozen=True)
class RouteCatalog:
    """Read-only snapshot of stops, routes and transfer points.

    The snapshot is fetched fresh before each discovery call and is never
    mutated by the engine. Construction enforces the catalog invariants:
    stop ids are unique and no route visits the same stop twice.
    """

    stops: tuple[Stop, ...] = field(default_factory=tuple)
    routes: tuple[Route, ...] = field(default_factory=tuple)
    transfer_points: tuple[TransferPoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for stop in self.stops:
            if stop.id in seen:
                raise CatalogError(f"Duplicate stop id in catalog: {stop.id}")
            seen.add(stop.id)

        for route in self.routes:
            route_stop_ids = route.stop_ids
            if len(route_stop_ids) != len(set(route_stop_ids)):
                duplicates = sorted({s for s in route_stop_ids if route_stop_ids.count(s) > 1})
                raise CatalogError(f"Route {route.id} visits stops more than once: {duplicates}")

    def stop_by_id(self, stop_id: str) -> Stop | None:
        for stop in self.stops:
            if stop.id == stop_id:
                return stop
        # Stops may only be known through a route's embedded sequence
        for route in self.routes:
            index = route.index_of(stop_id)
            if index is not None:
                return route.stops[index]
        return None

    def has_stop(self, stop_id: str) -> bool:
        return self.stop_by_id(stop_id) is not None

    def route_by_id(self, route_id: str) -> Route | None:
        for route in self.routes:
            if route.id == route_id:
                return route
        return None

    def transfer_point_for_stop(self, stop_id: str) -> TransferPoint | None:
        """Return the first registered transfer point at a stop, if any."""
        for transfer_point in self.transfer_points:
            if transfer_point.stop_id == stop_id:
                return transfer_point
        return None
