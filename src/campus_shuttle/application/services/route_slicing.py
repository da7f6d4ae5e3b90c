"""Helpers for cutting route segments out of a route's stop sequence."""

import math

from campus_shuttle.domain.models.discovery_policy import DirectionPolicy, DurationPolicy
from campus_shuttle.domain.models.route import Route
from campus_shuttle.domain.models.stop import Stop


def slice_between(
    route: Route,
    from_stop_id: str,
    to_stop_id: str,
    direction_policy: DirectionPolicy = DirectionPolicy.BIDIRECTIONAL,
) -> tuple[Stop, ...] | None:
    """Return the stops of ``route`` from one stop to another, both inclusive.

    The result always starts at ``from_stop_id``. Under the bidirectional
    policy the index range ``min..max`` is taken and reversed when the
    boarding stop comes later in the route; under the forward-only policy
    such a slice is rejected.

    Returns:
        The oriented slice, or None if a stop is not on the route or the
        direction is not allowed.
    """
    from_index = route.index_of(from_stop_id)
    to_index = route.index_of(to_stop_id)
    if from_index is None or to_index is None:
        return None

    if from_index <= to_index:
        return route.stops[from_index : to_index + 1]

    if direction_policy is DirectionPolicy.FORWARD_ONLY:
        return None

    return tuple(reversed(route.stops[to_index : from_index + 1]))


def segment_duration(
    route: Route,
    segment: tuple[Stop, ...],
    duration_policy: DurationPolicy = DurationPolicy.FULL_ROUTE,
) -> int:
    """Minutes attributed to riding ``segment`` of ``route``.

    ``FULL_ROUTE`` reports the route's whole estimated time even for a
    partial slice. ``PROPORTIONAL`` scales it by the share of legs ridden,
    rounded up to whole minutes.
    """
    if duration_policy is DurationPolicy.FULL_ROUTE:
        return route.estimated_time

    total_legs = len(route.stops) - 1
    if total_legs <= 0:
        return 0
    ridden_legs = max(len(segment) - 1, 0)
    return math.ceil(route.estimated_time * ridden_legs / total_legs)


def merge_peak_hours(*routes: Route) -> tuple[str, ...]:
    """Union of the routes' peak hour labels, keeping first-seen order."""
    merged: dict[str, None] = {}
    for route in routes:
        for label in route.peak_hours:
            merged.setdefault(label, None)
    return tuple(merged)
