"""Route catalog adapters."""

from campus_shuttle.adapters.catalog.catalog_parser import CatalogParser
from campus_shuttle.adapters.catalog.http_catalog_repository import HttpCatalogRepository
from campus_shuttle.adapters.catalog.toml_catalog_repository import TomlCatalogRepository

__all__ = [
    "CatalogParser",
    "HttpCatalogRepository",
    "TomlCatalogRepository",
]
