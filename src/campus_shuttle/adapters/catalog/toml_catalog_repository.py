"""TOML file catalog repository adapter."""

import logging

from campus_shuttle.adapters.catalog.catalog_parser import CatalogParser
from campus_shuttle.adapters.config.app_config import AppConfig
from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class TomlCatalogRepository(CatalogRepository):
    """Adapter reading the route catalog from the configured TOML file.

    The file is re-read on every fetch so each query sees a fresh snapshot.
    """

    def __init__(self, config: AppConfig, parser: CatalogParser | None = None) -> None:
        """Initialize with app config pointing at the catalog file."""
        self._config = config
        self._parser = parser or CatalogParser()

    async def fetch_catalog(self) -> RouteCatalog:
        """Load stops, routes and transfer points from the TOML file.

        Raises:
            FileNotFoundError: If the catalog file does not exist.
            CatalogError: If the file content is not a valid catalog.
        """
        toml_data = self._config.load_catalog_data()
        catalog = self._parser.parse_document(toml_data)
        logger.info(
            f"Loaded catalog from {self._config.catalog_file}: {len(catalog.stops)} stop(s), "
            f"{len(catalog.routes)} route(s), {len(catalog.transfer_points)} transfer point(s)"
        )
        return catalog
