"""Trip plan domain model."""

from dataclasses import dataclass, field
from enum import Enum

from .itinerary import Itinerary


class DiscoveryOutcome(str, Enum):
    """Result classification of a route discovery query."""

    FOUND = "found"
    NO_VIABLE_ROUTE = "no_viable_route"
    INVALID_QUERY = "invalid_query"
    SAME_STOP = "same_stop"


@dataclass(frozen=True)
class TripPlan:
    """Ranked itineraries for an origin/destination query."""

    origin_stop_id: str
    destination_stop_id: str
    outcome: DiscoveryOutcome
    itineraries: list[Itinerary] = field(default_factory=list)
    reason: str | None = None  # Human readable explanation when nothing was found

    @property
    def has_itineraries(self) -> bool:
        return bool(self.itineraries)


@dataclass(frozen=True)
class BestRoute:
    """First direct itinerary and fastest registered transfer for a query."""

    direct: Itinerary | None = None
    transfer: Itinerary | None = None
