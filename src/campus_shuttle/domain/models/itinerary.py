"""Itinerary domain model."""

from dataclasses import dataclass, field
from enum import Enum

from .route import Route
from .stop import Stop
from .transfer_point import TransferPoint


class ItineraryKind(str, Enum):
    """Whether an itinerary rides one route or switches once."""

    DIRECT = "direct"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Itinerary:
    """A computed way to travel between two stops.

    Direct itineraries ride a contiguous slice of one route. Transfer
    itineraries ride a slice of ``route`` up to ``transfer_stop`` and then a
    slice of ``second_route`` from there on; ``stops`` holds the joined
    sequence with the transfer stop appearing once.
    """

    kind: ItineraryKind
    route: Route
    stops: tuple[Stop, ...]
    distance_km: float | None  # None only for unranked lookups with unknown coordinates
    duration_minutes: int
    leg_distances_km: tuple[float | None, ...] = field(default_factory=tuple)
    peak_hours: tuple[str, ...] = field(default_factory=tuple)
    second_route: Route | None = None
    transfer_stop: Stop | None = None
    transfer_point: TransferPoint | None = None  # Only set when the stop is registered
    wait_time_minutes: int = 0

    @property
    def is_transfer(self) -> bool:
        return self.kind is ItineraryKind.TRANSFER

    @property
    def name(self) -> str:
        if self.second_route is None:
            return self.route.name
        return f"{self.route.name} → {self.second_route.name}"

    @property
    def description(self) -> str:
        if self.transfer_stop is None:
            return self.route.description
        return f"Transfer at {self.transfer_stop.name}"

    @property
    def origin(self) -> Stop:
        return self.stops[0]

    @property
    def destination(self) -> Stop:
        return self.stops[-1]
