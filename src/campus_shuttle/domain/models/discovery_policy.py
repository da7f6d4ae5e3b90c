"""Policies that shape how itineraries are discovered."""

from enum import Enum


class DirectionPolicy(str, Enum):
    """Which travel direction along a route is allowed."""

    # Slice between the lower and higher index whichever endpoint comes first
    BIDIRECTIONAL = "bidirectional"
    # Origin must come before destination in the route's native order
    FORWARD_ONLY = "forward_only"


class DurationPolicy(str, Enum):
    """How a route slice's duration is derived from the route's duration."""

    FULL_ROUTE = "full_route"
    PROPORTIONAL = "proportional"


class TransferSearchKind(str, Enum):
    """Selectable transfer search strategies."""

    ANY_STOP = "any_stop"
    REGISTERED = "registered"
