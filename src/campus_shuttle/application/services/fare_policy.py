"""Point cost of a trip."""

import math

DEFAULT_MINUTES_PER_POINT = 5


def points_for_duration(
    duration_minutes: int, minutes_per_point: int = DEFAULT_MINUTES_PER_POINT
) -> int:
    """Points deducted from a rider's balance for a trip of the given length.

    One point per started block of ``minutes_per_point`` minutes.
    """
    if minutes_per_point <= 0:
        raise ValueError("minutes_per_point must be positive")
    return math.ceil(max(duration_minutes, 0) / minutes_per_point)
