"""Domain models for campus shuttle route discovery."""

from campus_shuttle.domain.models.booking_request import BookingRequest, BookingStatus
from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.models.discovery_policy import (
    DirectionPolicy,
    DurationPolicy,
    TransferSearchKind,
)
from campus_shuttle.domain.models.error_details import CatalogError, ErrorDetails
from campus_shuttle.domain.models.itinerary import Itinerary, ItineraryKind
from campus_shuttle.domain.models.nearby_stop import NearbyStop
from campus_shuttle.domain.models.rider_session import RiderSession
from campus_shuttle.domain.models.route import Route
from campus_shuttle.domain.models.stop import Stop
from campus_shuttle.domain.models.transfer_point import TransferPoint
from campus_shuttle.domain.models.trip_plan import BestRoute, DiscoveryOutcome, TripPlan

__all__ = [
    "BestRoute",
    "BookingRequest",
    "BookingStatus",
    "CatalogError",
    "DirectionPolicy",
    "DiscoveryOutcome",
    "DurationPolicy",
    "ErrorDetails",
    "Itinerary",
    "ItineraryKind",
    "NearbyStop",
    "RiderSession",
    "Route",
    "RouteCatalog",
    "Stop",
    "TransferPoint",
    "TransferSearchKind",
    "TripPlan",
]
