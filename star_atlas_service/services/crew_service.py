"""
Crew list resolution for player profiles.
"""

from typing import List, Optional

import structlog

from star_atlas_service.api.schemas.crew import CrewMember
from star_atlas_service.services.crew_catalog import CrewCatalogClient
from star_atlas_service.services.crew_normalizer import normalize_crew_list


logger = structlog.get_logger(__name__)


class CrewService:
    """Combines the catalog client with crew normalization."""

    def __init__(self, catalog: Optional[CrewCatalogClient] = None):
        self.catalog = catalog or CrewCatalogClient()
        self.logger = logger.bind(service="crew_service")

    async def fetch_crew_list(self, player_profile_pubkey: str) -> List[CrewMember]:
        """Fetch and normalize the crew of a player profile."""
        # On-chain crew discovery is not implemented; the catalog API is the source
        self.logger.info("Fetching crew list", profile=player_profile_pubkey)

        records = await self.catalog.fetch_crew_inventory(player_profile_pubkey)
        crew = normalize_crew_list(records)

        self.logger.info(
            "Parsed crew members",
            profile=player_profile_pubkey,
            crew_count=len(crew)
        )
        return crew


# Global service instance
_crew_service: Optional[CrewService] = None


def get_crew_service() -> CrewService:
    """Get or create the global crew service."""
    global _crew_service
    if _crew_service is None:
        _crew_service = CrewService()
    return _crew_service
