"""Great-circle distances between stops.

All values are kilometres rounded to two decimals. ``None`` means the
distance is unknown because a coordinate is missing; callers must not treat
it as zero. Coordinates are not range checked, so out-of-range values give
a numerically defined but meaningless result.

Rounding: each leg is rounded on its own and path totals are the sum of the
rounded legs, rounded again only to drop float noise. Leg distances shown to
a rider therefore always add up to the total shown next to them.
"""

import math
from collections.abc import Sequence
from typing import Protocol

EARTH_RADIUS_KM = 6371.0


class HasCoordinates(Protocol):
    """Anything with a latitude and longitude in degrees."""

    @property
    def latitude(self) -> float | None: ...

    @property
    def longitude(self) -> float | None: ...


def distance_between(
    lat1: float | None, lon1: float | None, lat2: float | None, lon2: float | None
) -> float | None:
    """Haversine distance between two coordinate pairs."""
    if lat1 is None or lon1 is None or lat2 is None or lon2 is None:
        return None

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_KM * c, 2)


def distance(point_a: HasCoordinates, point_b: HasCoordinates) -> float | None:
    """Great-circle distance between two points, or None if a coordinate is absent."""
    return distance_between(
        point_a.latitude, point_a.longitude, point_b.latitude, point_b.longitude
    )


def leg_distances(stops: Sequence[HasCoordinates]) -> list[float | None]:
    """Distance of every consecutive pair, in order."""
    return [distance(stops[i], stops[i + 1]) for i in range(len(stops) - 1)]


def path_distance(stops: Sequence[HasCoordinates]) -> float | None:
    """Total distance along an ordered sequence of stops.

    Returns None for fewer than two stops or as soon as one leg is unknown.
    """
    if len(stops) < 2:
        return None

    total = 0.0
    for i in range(len(stops) - 1):
        leg = distance(stops[i], stops[i + 1])
        if leg is None:
            return None
        total += leg

    return round(total, 2)
