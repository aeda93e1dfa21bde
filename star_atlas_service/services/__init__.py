"""
Data resolution pipeline: player profiles and crew lists.
"""

from typing import List

from star_atlas_service.api.schemas.crew import CrewMember
from star_atlas_service.api.schemas.profiles import PlayerProfile
from .crew_service import CrewService, get_crew_service
from .profile_service import (
    PlayerProfileService,
    ProfileSource,
    ChainProfileSource,
    StaticProfileSource,
    get_player_profile_service,
    close_player_profile_service,
)


async def resolve_player_profiles(wallet: str) -> List[PlayerProfile]:
    """Resolve the player profiles for a wallet."""
    return await get_player_profile_service().fetch_player_profiles(wallet)


async def resolve_crew_list(profile_key: str) -> List[CrewMember]:
    """Resolve the crew list of a player profile."""
    return await get_crew_service().fetch_crew_list(profile_key)


__all__ = [
    "CrewService",
    "PlayerProfileService",
    "ProfileSource",
    "ChainProfileSource",
    "StaticProfileSource",
    "get_crew_service",
    "get_player_profile_service",
    "close_player_profile_service",
    "resolve_player_profiles",
    "resolve_crew_list",
]
