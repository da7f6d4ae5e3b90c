"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """Represents a shuttle stop."""

    id: str
    name: str
    latitude: float | None = None  # None means the stop has no known position
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are known."""
        return self.latitude is not None and self.longitude is not None
