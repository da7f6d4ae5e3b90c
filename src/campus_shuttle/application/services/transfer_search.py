"""Single-transfer search strategies.

Two strategies with different eligibility and ranking rules:

- ``AnyStopTransferSearch`` joins two routes at any stop they share and
  returns every candidate.
- ``RegisteredTransferPointSearch`` joins routes only at registered transfer
  points, adds the transfer point's wait time, and keeps the single fastest
  candidate.
"""

import logging
import math

from campus_shuttle.application.services.route_slicing import (
    merge_peak_hours,
    segment_duration,
    slice_between,
)
from campus_shuttle.domain.geodesic import leg_distances, path_distance
from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.models.discovery_policy import (
    DirectionPolicy,
    DurationPolicy,
    TransferSearchKind,
)
from campus_shuttle.domain.models.itinerary import Itinerary, ItineraryKind
from campus_shuttle.domain.models.route import Route
from campus_shuttle.domain.models.stop import Stop
from campus_shuttle.domain.models.transfer_point import TransferPoint
from campus_shuttle.domain.ports.transfer_search import TransferSearch

logger = logging.getLogger(__name__)


class AnyStopTransferSearch:
    """Transfer search that accepts any stop shared by two routes."""

    def __init__(self, duration_policy: DurationPolicy = DurationPolicy.FULL_ROUTE) -> None:
        self._duration_policy = duration_policy

    def find_transfers(
        self,
        catalog: RouteCatalog,
        origin_stop_id: str,
        destination_stop_id: str,
        direction_policy: DirectionPolicy = DirectionPolicy.BIDIRECTIONAL,
    ) -> list[Itinerary]:
        """Enumerate every (first route, second route, shared stop) candidate.

        The shared stop is used as the transfer stop whether or not it is a
        registered transfer point; a registered point found there is attached
        for labelling only and adds no wait time.

        Both legs are ridden in route order: the origin must not come after
        the shared stop on the first route, nor the shared stop after the
        destination on the second. ``direction_policy`` only affects direct
        trips, so it does not loosen this.
        """
        candidates: list[Itinerary] = []
        discarded = 0

        for first_route in catalog.routes:
            if not first_route.contains(origin_stop_id):
                continue
            for second_route in catalog.routes:
                if second_route.id == first_route.id:
                    continue
                if not second_route.contains(destination_stop_id):
                    continue

                shared_stops = [s for s in first_route.stops if second_route.contains(s.id)]
                for transfer_stop in shared_stops:
                    itinerary = self._build_candidate(
                        catalog,
                        first_route,
                        second_route,
                        transfer_stop,
                        origin_stop_id,
                        destination_stop_id,
                    )
                    if itinerary is None:
                        discarded += 1
                    else:
                        candidates.append(itinerary)

        logger.debug(
            f"Any-stop transfer search {origin_stop_id} -> {destination_stop_id}: "
            f"{len(candidates)} candidate(s), {discarded} discarded"
        )
        return candidates

    def _build_candidate(
        self,
        catalog: RouteCatalog,
        first_route: Route,
        second_route: Route,
        transfer_stop: Stop,
        origin_stop_id: str,
        destination_stop_id: str,
    ) -> Itinerary | None:
        first_segment = slice_between(
            first_route, origin_stop_id, transfer_stop.id, DirectionPolicy.FORWARD_ONLY
        )
        second_segment = slice_between(
            second_route, transfer_stop.id, destination_stop_id, DirectionPolicy.FORWARD_ONLY
        )
        if first_segment is None or second_segment is None:
            return None

        # Segments of a single stop have no distance and drop the candidate
        first_distance = path_distance(first_segment)
        second_distance = path_distance(second_segment)
        if first_distance is None or second_distance is None:
            return None

        return Itinerary(
            kind=ItineraryKind.TRANSFER,
            route=first_route,
            second_route=second_route,
            stops=first_segment + second_segment[1:],
            distance_km=round(first_distance + second_distance, 2),
            leg_distances_km=tuple(leg_distances(first_segment) + leg_distances(second_segment)),
            duration_minutes=segment_duration(first_route, first_segment, self._duration_policy)
            + segment_duration(second_route, second_segment, self._duration_policy),
            peak_hours=merge_peak_hours(first_route, second_route),
            transfer_stop=transfer_stop,
            transfer_point=catalog.transfer_point_for_stop(transfer_stop.id),
        )


class RegisteredTransferPointSearch:
    """Transfer search restricted to registered transfer points.

    Total time is both routes' full estimated times plus the transfer
    point's wait time, and only the fastest candidate is kept. Unknown
    segment distances count as zero since distance does not rank here.
    """

    def find_transfers(
        self,
        catalog: RouteCatalog,
        origin_stop_id: str,
        destination_stop_id: str,
        direction_policy: DirectionPolicy = DirectionPolicy.BIDIRECTIONAL,
    ) -> list[Itinerary]:
        best = self.find_optimal_transfer(
            catalog, origin_stop_id, destination_stop_id, direction_policy
        )
        return [best] if best is not None else []

    def find_optimal_transfer(
        self,
        catalog: RouteCatalog,
        origin_stop_id: str,
        destination_stop_id: str,
        direction_policy: DirectionPolicy = DirectionPolicy.BIDIRECTIONAL,
    ) -> Itinerary | None:
        """Return the registered-transfer itinerary with the least total time.

        Ties keep the first candidate in enumeration order: transfer points
        in catalog order, then first routes, then second routes.
        """
        best: Itinerary | None = None
        min_total_time = math.inf

        for transfer_point in catalog.transfer_points:
            transfer_stop = self._find_transfer_stop(catalog, transfer_point)
            if transfer_stop is None:
                continue

            first_routes = [
                r
                for r in catalog.routes
                if r.contains(origin_stop_id) and r.contains(transfer_point.stop_id)
            ]
            second_routes = [
                r
                for r in catalog.routes
                if r.contains(transfer_point.stop_id) and r.contains(destination_stop_id)
            ]

            for first_route in first_routes:
                for second_route in second_routes:
                    if second_route.id == first_route.id:
                        continue
                    total_time = (
                        first_route.estimated_time
                        + second_route.estimated_time
                        + transfer_point.wait_time
                    )
                    if total_time >= min_total_time:
                        continue
                    candidate = self._build_candidate(
                        first_route,
                        second_route,
                        transfer_stop,
                        transfer_point,
                        origin_stop_id,
                        destination_stop_id,
                        direction_policy,
                        total_time,
                    )
                    if candidate is not None:
                        best = candidate
                        min_total_time = total_time

        if best is None:
            logger.debug(
                f"No registered transfer found for {origin_stop_id} -> {destination_stop_id}"
            )
        return best

    @staticmethod
    def _find_transfer_stop(catalog: RouteCatalog, transfer_point: TransferPoint) -> Stop | None:
        # The stop must be served by at least one route to be usable
        for route in catalog.routes:
            index = route.index_of(transfer_point.stop_id)
            if index is not None:
                return route.stops[index]
        return None

    @staticmethod
    def _build_candidate(
        first_route: Route,
        second_route: Route,
        transfer_stop: Stop,
        transfer_point: TransferPoint,
        origin_stop_id: str,
        destination_stop_id: str,
        direction_policy: DirectionPolicy,
        total_time: int,
    ) -> Itinerary | None:
        first_segment = slice_between(
            first_route, origin_stop_id, transfer_stop.id, direction_policy
        )
        second_segment = slice_between(
            second_route, transfer_stop.id, destination_stop_id, direction_policy
        )
        if first_segment is None or second_segment is None:
            return None

        # Distance covers the ridden segments, not the full routes
        first_distance = path_distance(first_segment) or 0.0
        second_distance = path_distance(second_segment) or 0.0

        return Itinerary(
            kind=ItineraryKind.TRANSFER,
            route=first_route,
            second_route=second_route,
            stops=first_segment + second_segment[1:],
            distance_km=round(first_distance + second_distance, 2),
            leg_distances_km=tuple(leg_distances(first_segment) + leg_distances(second_segment)),
            duration_minutes=total_time,
            peak_hours=merge_peak_hours(first_route, second_route),
            transfer_stop=transfer_stop,
            transfer_point=transfer_point,
            wait_time_minutes=transfer_point.wait_time,
        )


def create_transfer_search(
    kind: TransferSearchKind, duration_policy: DurationPolicy = DurationPolicy.FULL_ROUTE
) -> TransferSearch:
    """Create the transfer search strategy selected by configuration."""
    if kind is TransferSearchKind.REGISTERED:
        return RegisteredTransferPointSearch()
    return AnyStopTransferSearch(duration_policy)
