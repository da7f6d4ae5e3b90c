"""Catalog repository port."""

from typing import Protocol

from campus_shuttle.domain.models.catalog import RouteCatalog


class CatalogRepository(Protocol):
    """Port for retrieving a fresh snapshot of the route catalog."""

    async def fetch_catalog(self) -> RouteCatalog:
        """Fetch stops, routes and transfer points.

        Raises:
            CatalogError: If the catalog cannot be retrieved or is malformed.
        """
        ...
