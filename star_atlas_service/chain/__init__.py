"""
On-chain primitives for Star Atlas player profile accounts.
"""

from .pda import get_program_id, derive_player_name_pda
from .player_name import PlayerNameAccount, decode_player_name, parse_player_name_account

__all__ = [
    "get_program_id",
    "derive_player_name_pda",
    "PlayerNameAccount",
    "decode_player_name",
    "parse_player_name_account",
]
