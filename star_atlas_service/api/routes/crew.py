"""
Crew routes.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, status

import structlog

from star_atlas_service.api.dependencies import get_crew_list_service
from star_atlas_service.api.schemas.common import (
    ApiResponse,
    create_error_response,
    create_success_response,
    to_json_response,
)
from star_atlas_service.api.schemas.crew import CrewMember
from star_atlas_service.services.crew_service import CrewService


logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get(
    "/crew",
    response_model=ApiResponse[List[CrewMember]],
    summary="Get Crew List",
    description="Crew members of a player profile from the Star Atlas catalog"
)
async def get_crew_list(
    player_profile_pubkey: str = Query(..., description="Player profile address"),
    service: CrewService = Depends(get_crew_list_service)
):
    """Get crew list for a player profile."""
    logger.info("Fetching crew list for profile", profile=player_profile_pubkey)

    try:
        crew = await service.fetch_crew_list(player_profile_pubkey)
    except Exception as e:
        logger.error("Failed to fetch crew list", profile=player_profile_pubkey, error=str(e))
        return to_json_response(
            create_error_response(str(e)),
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.info("Successfully fetched crew members", count=len(crew))
    return to_json_response(create_success_response(crew))
