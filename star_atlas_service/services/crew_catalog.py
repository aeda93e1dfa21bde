"""
Star Atlas catalog API client for crew inventories.
"""

import asyncio
from typing import Any, Callable, List, Optional

import aiohttp
import structlog

from star_atlas_service.core.config import settings, StarAtlasConfig
from star_atlas_service.core.exceptions import CatalogMalformedError, CatalogUnavailableError


logger = structlog.get_logger(__name__)


class CrewCatalogClient:
    """Fetches crew inventories from the Star Atlas REST API."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        session_factory: Callable[..., aiohttp.ClientSession] = aiohttp.ClientSession
    ):
        self.timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else settings.catalog_timeout
        )
        self.session_factory = session_factory
        self.logger = logger.bind(service="crew_catalog")

    async def fetch_crew_inventory(self, profile_id: str) -> List[Any]:
        """
        Fetch the raw crew records of a player profile.

        Args:
            profile_id: Player profile identifier

        Returns:
            Elements of the ``crew`` array, unvalidated

        Raises:
            CatalogUnavailableError: Transport failure or non-2xx status
            CatalogMalformedError: Body is not JSON or has no ``crew`` array
        """
        url = StarAtlasConfig.get_crew_inventory_url(profile_id)
        self.logger.info("Fetching crew from API", url=url)

        try:
            async with self.session_factory(timeout=self.timeout) as session:
                async with session.get(url) as response:
                    if not 200 <= response.status < 300:
                        raise CatalogUnavailableError(
                            f"API returned error status: {response.status}",
                            url,
                            response.status
                        )
                    try:
                        data = await response.json(content_type=None)
                    except ValueError as e:
                        raise CatalogMalformedError(
                            f"Failed to parse API response: {e}", url
                        ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error("Crew catalog request failed", url=url, error=str(e))
            raise CatalogUnavailableError(
                f"Failed to fetch from Star Atlas API: {e}", url
            ) from e

        crew = data.get("crew") if isinstance(data, dict) else None
        if not isinstance(crew, list):
            raise CatalogMalformedError("Missing 'crew' field in API response", url)

        return crew
