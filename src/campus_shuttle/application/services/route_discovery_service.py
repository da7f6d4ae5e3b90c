"""Route discovery engine."""

import logging

from campus_shuttle.application.services.route_slicing import segment_duration, slice_between
from campus_shuttle.application.services.transfer_search import (
    AnyStopTransferSearch,
    RegisteredTransferPointSearch,
)
from campus_shuttle.domain.geodesic import leg_distances, path_distance
from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.models.discovery_policy import DirectionPolicy, DurationPolicy
from campus_shuttle.domain.models.itinerary import Itinerary, ItineraryKind
from campus_shuttle.domain.models.route import Route
from campus_shuttle.domain.models.trip_plan import BestRoute
from campus_shuttle.domain.ports.transfer_search import TransferSearch

logger = logging.getLogger(__name__)


class RouteDiscoveryService:
    """Computes direct and single-transfer itineraries over a catalog snapshot.

    The service is pure: it never mutates the catalog, performs no I/O and
    never raises for unknown stops or routes. Work grows with
    ``routes * stops`` for direct candidates and quadratically in the number
    of routes for transfer candidates.
    """

    def __init__(
        self,
        transfer_search: TransferSearch | None = None,
        direction_policy: DirectionPolicy = DirectionPolicy.BIDIRECTIONAL,
        duration_policy: DurationPolicy = DurationPolicy.FULL_ROUTE,
    ) -> None:
        """Initialize with a transfer strategy and discovery policies."""
        self._transfer_search = transfer_search or AnyStopTransferSearch(duration_policy)
        self._direction_policy = direction_policy
        self._duration_policy = duration_policy

    @property
    def direction_policy(self) -> DirectionPolicy:
        return self._direction_policy

    def discover(
        self, catalog: RouteCatalog, origin_stop_id: str, destination_stop_id: str
    ) -> list[Itinerary]:
        """Find and rank every viable itinerary between two stops.

        Direct candidates are listed before transfer candidates and the
        merged list is sorted by distance with a stable sort, so equal
        distances keep enumeration order.

        Args:
            catalog: Read-only catalog snapshot.
            origin_stop_id: Stop the rider boards at.
            destination_stop_id: Stop the rider leaves at.

        Returns:
            Itineraries ascending by distance; empty when nothing is viable.
        """
        direct = self.find_direct_itineraries(catalog, origin_stop_id, destination_stop_id)
        transfers = self._transfer_search.find_transfers(
            catalog, origin_stop_id, destination_stop_id, self._direction_policy
        )

        itineraries = direct + transfers
        itineraries.sort(key=lambda itinerary: itinerary.distance_km)

        logger.debug(
            f"Discovered {len(direct)} direct and {len(transfers)} transfer itinerary(ies) "
            f"for {origin_stop_id} -> {destination_stop_id}"
        )
        return itineraries

    def find_direct_itineraries(
        self, catalog: RouteCatalog, origin_stop_id: str, destination_stop_id: str
    ) -> list[Itinerary]:
        """One itinerary per route serving both stops, in catalog order."""
        itineraries: list[Itinerary] = []

        for route in catalog.routes:
            itinerary = self._direct_itinerary(route, origin_stop_id, destination_stop_id)
            if itinerary is None:
                continue
            if itinerary.distance_km is None:
                logger.debug(
                    f"Skipping route {route.id}: segment has fewer than two stops "
                    f"or a stop without coordinates"
                )
                continue
            itineraries.append(itinerary)

        return itineraries

    def _direct_itinerary(
        self, route: Route, origin_stop_id: str, destination_stop_id: str
    ) -> Itinerary | None:
        segment = slice_between(route, origin_stop_id, destination_stop_id, self._direction_policy)
        if segment is None:
            return None
        return Itinerary(
            kind=ItineraryKind.DIRECT,
            route=route,
            stops=segment,
            distance_km=path_distance(segment),
            leg_distances_km=tuple(leg_distances(segment)),
            duration_minutes=segment_duration(route, segment, self._duration_policy),
            peak_hours=route.peak_hours,
        )

    def find_optimal_transfer(
        self, catalog: RouteCatalog, origin_stop_id: str, destination_stop_id: str
    ) -> Itinerary | None:
        """Fastest transfer through a registered transfer point, if any."""
        return RegisteredTransferPointSearch().find_optimal_transfer(
            catalog, origin_stop_id, destination_stop_id, self._direction_policy
        )

    def find_best_route(
        self, catalog: RouteCatalog, origin_stop_id: str, destination_stop_id: str
    ) -> BestRoute:
        """First route serving both stops plus the fastest registered transfer.

        The direct option is the first route in catalog order that serves both
        stops in an allowed direction, even when its distance is unknown.
        """
        direct = next(
            (
                itinerary
                for itinerary in (
                    self._direct_itinerary(route, origin_stop_id, destination_stop_id)
                    for route in catalog.routes
                )
                if itinerary is not None
            ),
            None,
        )
        return BestRoute(
            direct=direct,
            transfer=self.find_optimal_transfer(catalog, origin_stop_id, destination_stop_id),
        )
