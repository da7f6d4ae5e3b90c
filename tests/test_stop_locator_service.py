"""Tests for the nearby stop search."""

from campus_shuttle.application.services import find_nearest_stops
from campus_shuttle.domain.models import Stop


def _stops() -> list[Stop]:
    return [
        Stop(id="far", name="Far", latitude=0.0, longitude=3.0),
        Stop(id="unknown", name="Unknown"),
        Stop(id="near", name="Near", latitude=0.0, longitude=1.0),
        Stop(id="mid", name="Mid", latitude=0.0, longitude=2.0),
        Stop(id="here", name="Here", latitude=0.0, longitude=0.0),
    ]


def test_returns_three_nearest_by_default() -> None:
    """Given five stops, when searching from the origin, then the three nearest are listed."""
    nearest = find_nearest_stops(_stops(), 0.0, 0.0)

    assert [n.stop.id for n in nearest] == ["here", "near", "mid"]
    assert nearest[0].distance_km == 0.0
    assert nearest[1].distance_km == 111.19


def test_stops_without_coordinates_sort_last() -> None:
    """Given an unlocated stop, when listing all, then it comes last with unknown distance."""
    nearest = find_nearest_stops(_stops(), 0.0, 0.0, limit=10)

    assert nearest[-1].stop.id == "unknown"
    assert nearest[-1].distance_km is None
    assert len(nearest) == 5


def test_non_positive_limit_returns_nothing() -> None:
    """Given limit zero, when searching, then no stops are returned."""
    assert find_nearest_stops(_stops(), 0.0, 0.0, limit=0) == []
