"""Nearby stop domain model."""

from dataclasses import dataclass

from .stop import Stop


@dataclass(frozen=True)
class NearbyStop:
    """A stop together with its distance from a reference position."""

    stop: Stop
    distance_km: float | None  # None when the stop has no coordinates
