"""Shared catalog fixtures."""

import pytest

from campus_shuttle.domain.models import Route, RouteCatalog, Stop, TransferPoint


@pytest.fixture
def stop_a() -> Stop:
    return Stop(id="A", name="Stop A", latitude=0.0, longitude=0.0)


@pytest.fixture
def stop_b() -> Stop:
    return Stop(id="B", name="Stop B", latitude=0.0, longitude=1.0)


@pytest.fixture
def stop_c() -> Stop:
    return Stop(id="C", name="Stop C", latitude=0.0, longitude=2.0)


@pytest.fixture
def line_catalog(stop_a: Stop, stop_b: Stop, stop_c: Stop) -> RouteCatalog:
    """One route R1 = A, B, C taking 20 minutes."""
    return RouteCatalog(
        stops=(stop_a, stop_b, stop_c),
        routes=(
            Route(
                id="R1",
                name="Route 1",
                description="Along the equator",
                stops=(stop_a, stop_b, stop_c),
                estimated_time=20,
                peak_hours=("08:00-09:00",),
            ),
        ),
    )


@pytest.fixture
def transfer_catalog(stop_a: Stop, stop_b: Stop, stop_c: Stop) -> RouteCatalog:
    """R1 = A, B (10 min) and R2 = B, C (15 min) joined by a transfer point at B."""
    return RouteCatalog(
        stops=(stop_a, stop_b, stop_c),
        routes=(
            Route(
                id="R1",
                name="Route 1",
                stops=(stop_a, stop_b),
                estimated_time=10,
                peak_hours=("08:00-09:00", "17:00-18:00"),
            ),
            Route(
                id="R2",
                name="Route 2",
                stops=(stop_b, stop_c),
                estimated_time=15,
                peak_hours=("17:00-18:00", "12:00-13:00"),
            ),
        ),
        transfer_points=(TransferPoint(id="TP-B", stop_id="B", name="B Interchange", wait_time=5),),
    )
