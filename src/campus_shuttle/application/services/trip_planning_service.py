"""Trip planning service."""

import logging
from datetime import datetime

from campus_shuttle.application.services.fare_policy import (
    DEFAULT_MINUTES_PER_POINT,
    points_for_duration,
)
from campus_shuttle.application.services.route_discovery_service import RouteDiscoveryService
from campus_shuttle.domain.models.booking_request import BookingRequest
from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.models.trip_plan import DiscoveryOutcome, TripPlan
from campus_shuttle.domain.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

NO_ROUTES_REASON = "No routes available"


class TripPlanningService:
    """Service that answers rider trip queries against the route catalog."""

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        discovery_service: RouteDiscoveryService | None = None,
    ) -> None:
        """Initialize with a catalog repository and a discovery engine."""
        self._catalog_repository = catalog_repository
        self._discovery_service = discovery_service or RouteDiscoveryService()

    async def plan_trip(self, origin_stop_id: str, destination_stop_id: str) -> TripPlan:
        """Plan a trip on a freshly fetched catalog snapshot.

        Raises:
            CatalogError: If the catalog cannot be fetched.
        """
        catalog = await self._catalog_repository.fetch_catalog()
        return self.plan_with_catalog(catalog, origin_stop_id, destination_stop_id)

    def plan_with_catalog(
        self, catalog: RouteCatalog, origin_stop_id: str, destination_stop_id: str
    ) -> TripPlan:
        """Plan a trip on an already fetched catalog snapshot.

        Unknown stop ids and identical endpoints are reported through the
        plan's outcome rather than raised.

        Args:
            catalog: Catalog snapshot to search.
            origin_stop_id: Stop the rider boards at.
            destination_stop_id: Stop the rider leaves at.

        Returns:
            Trip plan with outcome and ranked itineraries.
        """
        missing = [
            stop_id
            for stop_id in (origin_stop_id, destination_stop_id)
            if not catalog.has_stop(stop_id)
        ]
        if missing:
            logger.warning(f"Trip query references unknown stop(s): {', '.join(missing)}")
            return TripPlan(
                origin_stop_id=origin_stop_id,
                destination_stop_id=destination_stop_id,
                outcome=DiscoveryOutcome.INVALID_QUERY,
                reason=f"Unknown stop(s): {', '.join(missing)}",
            )

        if origin_stop_id == destination_stop_id:
            return TripPlan(
                origin_stop_id=origin_stop_id,
                destination_stop_id=destination_stop_id,
                outcome=DiscoveryOutcome.SAME_STOP,
                reason="Origin and destination are the same stop",
            )

        itineraries = self._discovery_service.discover(
            catalog, origin_stop_id, destination_stop_id
        )
        if not itineraries:
            logger.info(f"No routes available for {origin_stop_id} -> {destination_stop_id}")
            return TripPlan(
                origin_stop_id=origin_stop_id,
                destination_stop_id=destination_stop_id,
                outcome=DiscoveryOutcome.NO_VIABLE_ROUTE,
                reason=NO_ROUTES_REASON,
            )

        return TripPlan(
            origin_stop_id=origin_stop_id,
            destination_stop_id=destination_stop_id,
            outcome=DiscoveryOutcome.FOUND,
            itineraries=itineraries,
        )

    @staticmethod
    def build_booking(
        plan: TripPlan,
        index: int,
        minutes_per_point: int = DEFAULT_MINUTES_PER_POINT,
        scheduled_time: datetime | None = None,
    ) -> BookingRequest:
        """Reduce the selected itinerary of a plan to a booking request.

        Raises:
            IndexError: If no itinerary exists at ``index``.
        """
        if index < 0 or index >= len(plan.itineraries):
            raise IndexError(
                f"Itinerary {index} not available; plan has {len(plan.itineraries)} option(s)"
            )
        itinerary = plan.itineraries[index]
        return BookingRequest.from_itinerary(
            itinerary,
            points_deducted=points_for_duration(itinerary.duration_minutes, minutes_per_point),
            scheduled_time=scheduled_time,
        )
