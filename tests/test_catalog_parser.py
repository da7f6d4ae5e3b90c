"""Tests for parsing raw catalog records."""

import pytest

from campus_shuttle.adapters.catalog import CatalogParser
from campus_shuttle.domain.models import CatalogError


@pytest.fixture
def parser() -> CatalogParser:
    return CatalogParser()


STOPS = [
    {"id": "a", "name": "Main Gate", "latitude": 28.4506, "longitude": 77.5842},
    {"id": "b", "name": "Library", "latitude": "28.4531", "longitude": "77.5861"},
    {"id": "c", "name": "Hostel", "latitude": None, "longitude": None},
]


def test_parses_routes_with_stop_ids(parser: CatalogParser) -> None:
    """Given routes referencing stop ids, when parsing, then stops are resolved in order."""
    catalog = parser.parse(
        stops=STOPS,
        routes=[
            {
                "id": "blue",
                "name": "Blue",
                "estimated_time": 20,
                "peak_hours": ["08:00-10:00"],
                "stop_ids": ["b", "a"],
            }
        ],
        transfer_points=[{"id": "tp", "stop_id": "a", "name": "Gate", "wait_time": 5}],
    )

    route = catalog.routes[0]
    assert route.stop_ids == ("b", "a")
    assert route.estimated_time == 20
    assert route.peak_hours == ("08:00-10:00",)
    assert catalog.stops[1].latitude == 28.4531
    assert catalog.transfer_points[0].wait_time == 5


def test_parses_embedded_stop_objects(parser: CatalogParser) -> None:
    """Given routes with embedded stop objects, when parsing, then they become stops."""
    catalog = parser.parse(
        stops=[],
        routes=[
            {
                "id": "green",
                "estimated_time": 15,
                "stops": [
                    {"id": "x", "name": "X", "latitude": 1.0, "longitude": 1.0},
                    {"id": "y", "name": "Y", "latitude": 1.0, "longitude": 2.0},
                ],
            }
        ],
    )

    assert catalog.routes[0].stop_ids == ("x", "y")
    assert catalog.routes[0].name == "green"
    assert catalog.has_stop("y")


def test_orders_route_stops_rows_by_stop_order(parser: CatalogParser) -> None:
    """Given separate route_stops rows, when parsing, then stop_order decides the sequence."""
    catalog = parser.parse(
        stops=STOPS,
        routes=[{"id": "r", "name": "R", "estimated_time": 10}],
        route_stops=[
            {"route_id": "r", "stop_id": "c", "stop_order": 3},
            {"route_id": "r", "stop_id": "a", "stop_order": 1},
            {"route_id": "r", "stop_id": "b", "stop_order": 2},
        ],
    )

    assert catalog.routes[0].stop_ids == ("a", "b", "c")


def test_missing_or_invalid_coordinates_are_unknown(parser: CatalogParser) -> None:
    """Given null or non-numeric coordinates, when parsing, then they are treated as absent."""
    catalog = parser.parse(
        stops=[*STOPS, {"id": "d", "name": "D", "latitude": "north", "longitude": 1}],
        routes=[],
    )

    assert catalog.stops[2].has_coordinates is False
    assert catalog.stops[3].latitude is None
    assert catalog.stops[3].longitude == 1.0


def test_records_without_id_are_skipped(parser: CatalogParser) -> None:
    """Given stops and transfer points without ids, when parsing, then they are skipped."""
    catalog = parser.parse(
        stops=[{"name": "Nameless"}, *STOPS],
        routes=[],
        transfer_points=[{"stop_id": "a"}],
    )

    assert len(catalog.stops) == 3
    assert catalog.transfer_points == ()


def test_unknown_stop_reference_raises(parser: CatalogParser) -> None:
    """Given a route referencing an unknown stop, when parsing, then CatalogError is raised."""
    with pytest.raises(CatalogError, match="unknown stop zz"):
        parser.parse(
            stops=STOPS,
            routes=[{"id": "r", "estimated_time": 5, "stop_ids": ["a", "zz"]}],
        )


def test_negative_estimated_time_raises(parser: CatalogParser) -> None:
    """Given a negative route duration, when parsing, then CatalogError is raised."""
    with pytest.raises(CatalogError, match="must not be negative"):
        parser.parse(stops=STOPS, routes=[{"id": "r", "estimated_time": -5, "stop_ids": ["a"]}])


def test_section_must_be_list(parser: CatalogParser) -> None:
    """Given stops as a table instead of a list, when parsing, then CatalogError is raised."""
    with pytest.raises(CatalogError, match="'stops' must be a list"):
        parser.parse(stops={"id": "a"}, routes=[])


def test_parse_document_reads_all_sections(parser: CatalogParser) -> None:
    """Given a single document, when parsing, then every section is used."""
    catalog = parser.parse_document(
        {
            "stops": STOPS,
            "routes": [{"id": "r", "estimated_time": 5, "stop_ids": ["a", "b"]}],
            "transfer_points": [{"id": "tp", "stop_id": "b", "wait_time": 2}],
        }
    )

    assert len(catalog.stops) == 3
    assert len(catalog.routes) == 1
    assert catalog.transfer_points[0].name == "tp"
