"""
Program-derived address helpers for the Star Atlas player profile program.
"""

from functools import lru_cache
from typing import Optional, Tuple

from solders.pubkey import Pubkey
import structlog

from star_atlas_service.core.config import settings, StarAtlasConfig
from star_atlas_service.core.exceptions import InvalidProgramIdError


logger = structlog.get_logger(__name__)


@lru_cache(maxsize=8)
def _parse_program_id(value: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except (ValueError, TypeError) as e:
        logger.error("Invalid player profile program ID", program_id=value, error=str(e))
        raise InvalidProgramIdError(value, str(e)) from e


def get_program_id(program_id: Optional[str] = None) -> Pubkey:
    """
    Parse the player profile program id.

    Args:
        program_id: Base58 program id, defaults to the configured one

    Returns:
        Program id as a Pubkey

    Raises:
        InvalidProgramIdError: If the program id is not a valid address
    """
    if program_id is None:
        program_id = settings.player_profile_program_id
    return _parse_program_id(program_id)


def derive_player_name_pda(
    profile_pubkey: Pubkey,
    program_id: Optional[Pubkey] = None
) -> Tuple[Pubkey, int]:
    """
    Derive the PlayerName PDA for a player profile.

    Seeds are ``("player_name", profile_pubkey)``; the bump is searched from
    255 downward and the first off-curve address is returned.

    Args:
        profile_pubkey: Player profile account address
        program_id: Owning program, defaults to the configured program id

    Returns:
        Tuple of (PDA, bump)
    """
    if program_id is None:
        program_id = get_program_id()

    return Pubkey.find_program_address(
        [StarAtlasConfig.PLAYER_NAME_SEED, bytes(profile_pubkey)],
        program_id
    )
