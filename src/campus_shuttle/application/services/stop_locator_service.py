"""Locating stops near a position."""

import math
from collections.abc import Iterable

from campus_shuttle.domain.geodesic import distance_between
from campus_shuttle.domain.models.nearby_stop import NearbyStop
from campus_shuttle.domain.models.stop import Stop

DEFAULT_NEARBY_LIMIT = 3


def find_nearest_stops(
    stops: Iterable[Stop],
    latitude: float,
    longitude: float,
    limit: int = DEFAULT_NEARBY_LIMIT,
) -> list[NearbyStop]:
    """Return the stops closest to a position, nearest first.

    Stops without coordinates sort after every located stop. Equal distances
    keep the input order.
    """
    if limit <= 0:
        return []

    nearby = [
        NearbyStop(
            stop=stop,
            distance_km=distance_between(latitude, longitude, stop.latitude, stop.longitude),
        )
        for stop in stops
    ]
    nearby.sort(key=lambda n: n.distance_km if n.distance_km is not None else math.inf)
    return nearby[:limit]
