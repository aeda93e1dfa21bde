"""
API dependencies for FastAPI endpoints.
Provides the pipeline services to the route handlers.
"""

from star_atlas_service.services.crew_service import CrewService, get_crew_service
from star_atlas_service.services.profile_service import (
    PlayerProfileService,
    get_player_profile_service,
)


async def get_profile_service() -> PlayerProfileService:
    """Player profile service dependency."""
    return get_player_profile_service()


async def get_crew_list_service() -> CrewService:
    """Crew service dependency."""
    return get_crew_service()
