"""
Parser for PlayerName account data.

PlayerName account structure:
- 8 bytes: discriminator (Anchor)
- 1 byte: version
- 32 bytes: profile pubkey
- 1 byte: bump
- Remaining bytes: name (UTF-8, NUL padded)
"""

from dataclasses import dataclass
from typing import Optional

from solders.pubkey import Pubkey

from star_atlas_service.core.config import StarAtlasConfig


@dataclass(frozen=True)
class PlayerNameAccount:
    """Header fields and name of a PlayerName account."""
    version: int
    profile: Pubkey
    bump: int
    name: str


def decode_player_name(data: Optional[bytes]) -> str:
    """
    Decode the display name stored in a PlayerName account.

    Short, empty or missing data is an expected state (the name account has
    not been initialized) and yields the default name instead of an error.

    Args:
        data: Raw account data

    Returns:
        Trimmed name or "Unnamed Profile"
    """
    name_offset = StarAtlasConfig.NAME_OFFSET

    if not data or len(data) <= name_offset:
        return StarAtlasConfig.UNNAMED_PROFILE

    name = (
        bytes(data[name_offset:])
        .decode("utf-8", errors="replace")
        .rstrip("\0")
        .strip()
    )
    return name or StarAtlasConfig.UNNAMED_PROFILE


def parse_player_name_account(data: Optional[bytes]) -> Optional[PlayerNameAccount]:
    """Parse the full account, or return None when the header is incomplete."""
    if not data or len(data) < StarAtlasConfig.NAME_OFFSET:
        return None

    data = bytes(data)
    profile_bytes = data[StarAtlasConfig.PROFILE_OFFSET:StarAtlasConfig.BUMP_OFFSET]

    return PlayerNameAccount(
        version=data[StarAtlasConfig.VERSION_OFFSET],
        profile=Pubkey.from_bytes(profile_bytes),
        bump=data[StarAtlasConfig.BUMP_OFFSET],
        name=decode_player_name(data),
    )
