"""HTTP catalog repository adapter for the shuttle booking API."""

import asyncio
import logging
from typing import Any

import aiohttp

from campus_shuttle.adapters.api_request_logger import log_api_request
from campus_shuttle.adapters.catalog.catalog_parser import CatalogParser
from campus_shuttle.adapters.config.app_config import AppConfig
from campus_shuttle.domain.models.catalog import RouteCatalog
from campus_shuttle.domain.models.error_details import CatalogError, ErrorDetails
from campus_shuttle.domain.models.rider_session import RiderSession
from campus_shuttle.domain.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

STOPS_PATH = "/api/stops"
ROUTES_PATH = "/api/routes"
ROUTE_STOPS_PATH = "/api/route-stops"
TRANSFER_POINTS_PATH = "/api/transfer-points"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


class HttpCatalogRepository(CatalogRepository):
    """Adapter fetching the route catalog from the shuttle REST API.

    Identity comes from an explicit rider session; without one the
    configured API token is used, and without either requests go out
    unauthenticated.
    """

    def __init__(
        self,
        config: AppConfig,
        rider_session: RiderSession | None = None,
        session: aiohttp.ClientSession | None = None,
        parser: CatalogParser | None = None,
    ) -> None:
        """Initialize with app config, optional rider session and aiohttp session."""
        self._config = config
        self._rider_session = rider_session
        self._session = session
        self._parser = parser or CatalogParser()

    def _headers(self) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if self._rider_session is not None:
            headers.update(self._rider_session.authorization_header())
        elif self._config.api_token:
            headers["Authorization"] = f"Bearer {self._config.api_token}"
        return headers

    def _url(self, path: str) -> str:
        return f"{self._config.api_base_url.rstrip('/')}{path}"

    async def fetch_catalog(self) -> RouteCatalog:
        """Fetch stops, routes, route stop order and transfer points in parallel.

        Raises:
            CatalogError: If any request fails or returns a non-200 status.
        """
        if self._session is not None:
            return await self._fetch_with(self._session)

        timeout = aiohttp.ClientTimeout(total=self._config.api_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await self._fetch_with(session)

    async def _fetch_with(self, session: aiohttp.ClientSession) -> RouteCatalog:
        stops, routes, route_stops, transfer_points = await asyncio.gather(
            self._get_json(session, STOPS_PATH),
            self._get_json(session, ROUTES_PATH),
            self._get_json(session, ROUTE_STOPS_PATH, required=False),
            self._get_json(session, TRANSFER_POINTS_PATH),
        )
        return self._parser.parse(
            stops=stops,
            routes=routes,
            transfer_points=transfer_points,
            route_stops=route_stops,
        )

    async def _get_json(
        self, session: aiohttp.ClientSession, path: str, required: bool = True
    ) -> Any:
        url = self._url(path)
        headers = self._headers()
        log_api_request("GET", url, headers=headers)

        try:
            async with session.get(url, headers=headers) as response:
                if response.status == 404 and not required:
                    logger.debug(f"Optional catalog endpoint {url} not available")
                    return None
                if response.status != 200:
                    response_text = await response.text()
                    logger.error(
                        f"Shuttle API returned status {response.status} for {url}: "
                        f"{response_text[:200]}"
                    )
                    raise CatalogError(
                        f"Failed to fetch {path}",
                        ErrorDetails(status_code=response.status, reason=response_text[:200]),
                    )
                return await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise CatalogError(f"Failed to fetch {path}", ErrorDetails(reason=str(e))) from e
