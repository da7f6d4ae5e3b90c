"""Application services."""

from campus_shuttle.application.services.fare_policy import points_for_duration
from campus_shuttle.application.services.route_discovery_service import RouteDiscoveryService
from campus_shuttle.application.services.stop_locator_service import find_nearest_stops
from campus_shuttle.application.services.transfer_search import (
    AnyStopTransferSearch,
    RegisteredTransferPointSearch,
    create_transfer_search,
)
from campus_shuttle.application.services.trip_planning_service import TripPlanningService

__all__ = [
    "AnyStopTransferSearch",
    "RegisteredTransferPointSearch",
    "RouteDiscoveryService",
    "TripPlanningService",
    "create_transfer_search",
    "find_nearest_stops",
    "points_for_duration",
]
