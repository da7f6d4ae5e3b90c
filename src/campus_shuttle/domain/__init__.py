"""Domain layer - core models, distance math and ports."""

from campus_shuttle.domain.models import (
    Itinerary,
    Route,
    RouteCatalog,
    Stop,
    TransferPoint,
)
from campus_shuttle.domain.ports import (
    CatalogRepository,
    TransferSearch,
)

__all__ = [
    "CatalogRepository",
    "Itinerary",
    "Route",
    "RouteCatalog",
    "Stop",
    "TransferPoint",
    "TransferSearch",
]
