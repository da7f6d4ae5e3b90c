"""Route domain model."""

from dataclasses import dataclass, field

from .stop import Stop


@dataclass(frozen=True)
class Route:
    """A one-directional shuttle route with an ordered stop sequence."""

    id: str
    name: str
    stops: tuple[Stop, ...]
    estimated_time: int  # Minutes for the full route, not for a sub-segment
    description: str = ""
    peak_hours: tuple[str, ...] = field(default_factory=tuple)

    def index_of(self, stop_id: str) -> int | None:
        """Return the position of a stop in this route, or None if absent."""
        for index, stop in enumerate(self.stops):
            if stop.id == stop_id:
                return index
        return None

    def contains(self, stop_id: str) -> bool:
        """Whether this route serves the given stop."""
        return self.index_of(stop_id) is not None

    @property
    def stop_ids(self) -> tuple[str, ...]:
        return tuple(stop.id for stop in self.stops)
