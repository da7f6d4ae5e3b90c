"""Ports (interfaces) for the ports-and-adapters architecture."""

from campus_shuttle.domain.ports.catalog_repository import CatalogRepository
from campus_shuttle.domain.ports.transfer_search import TransferSearch

__all__ = [
    "CatalogRepository",
    "TransferSearch",
]
