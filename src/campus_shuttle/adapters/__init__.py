"""Adapters layer - external system integrations."""

from campus_shuttle.adapters.catalog import (
    CatalogParser,
    HttpCatalogRepository,
    TomlCatalogRepository,
)
from campus_shuttle.adapters.config import AppConfig

__all__ = [
    "AppConfig",
    "CatalogParser",
    "HttpCatalogRepository",
    "TomlCatalogRepository",
]
