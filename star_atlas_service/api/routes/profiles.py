"""
Player profile routes.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, status

import structlog

from star_atlas_service.api.dependencies import get_profile_service
from star_atlas_service.api.schemas.common import (
    ApiResponse,
    create_error_response,
    create_success_response,
    to_json_response,
)
from star_atlas_service.api.schemas.profiles import PlayerProfile
from star_atlas_service.services.profile_service import PlayerProfileService


logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get(
    "/player-profiles",
    response_model=ApiResponse[List[PlayerProfile]],
    summary="Get Player Profiles",
    description="Player profiles for a wallet, with names read from chain"
)
async def get_player_profiles(
    wallet_address: str = Query(..., description="Solana wallet address"),
    service: PlayerProfileService = Depends(get_profile_service)
):
    """Get player profiles for a wallet address."""
    logger.info("Fetching player profiles for wallet", wallet=wallet_address)

    try:
        profiles = await service.fetch_player_profiles(wallet_address)
    except Exception as e:
        logger.error("Failed to fetch player profiles", wallet=wallet_address, error=str(e))
        return to_json_response(
            create_error_response(str(e)),
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.info("Successfully fetched profiles", count=len(profiles))
    return to_json_response(create_success_response(profiles))
