"""Transfer search port."""

from typing import Protocol

from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.models.discovery_policy import DirectionPolicy
from campus_shuttle.domain.models.itinerary import Itinerary


class TransferSearch(Protocol):
    """Port for strategies that enumerate single-transfer itineraries."""

    def find_transfers(
        self,
        catalog: RouteCatalog,
        origin_stop_id: str,
        destination_stop_id: str,
        direction_policy: DirectionPolicy,
    ) -> list[Itinerary]:
        """Find transfer itineraries from origin to destination.

        Args:
            catalog: Read-only catalog snapshot.
            origin_stop_id: Stop the rider boards at.
            destination_stop_id: Stop the rider leaves at.
            direction_policy: Whether segments may run against route order.

        Returns:
            Transfer itineraries in enumeration order. Never raises for
            unknown stops; they simply yield no candidates.
        """
        ...
