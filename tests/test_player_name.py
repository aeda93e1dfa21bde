"""
Test PlayerName account decoding.
"""

from solders.pubkey import Pubkey

from star_atlas_service.chain.player_name import decode_player_name, parse_player_name_account


PROFILE = Pubkey.from_string("B9JCkYPmqCeBzVGNq6jXqXnFqazrCTUSvD4Kd4HTTH3m")


def build_account(name: bytes, version: int = 1, bump: int = 254) -> bytes:
    return b"\x01" * 8 + bytes([version]) + bytes(PROFILE) + bytes([bump]) + name


def test_short_data_returns_default_name():
    for length in (0, 1, 8, 41, 42):
        assert decode_player_name(b"\x07" * length) == "Unnamed Profile"


def test_missing_data_returns_default_name():
    assert decode_player_name(None) == "Unnamed Profile"


def test_name_is_trimmed():
    assert decode_player_name(bytes(42) + "Nova ".encode("utf-8")) == "Nova"


def test_nul_padding_is_stripped():
    assert decode_player_name(build_account(b"  Captain Kirk\0\0\0\0")) == "Captain Kirk"


def test_all_nul_payload_returns_default_name():
    assert decode_player_name(build_account(b"\0" * 32)) == "Unnamed Profile"


def test_whitespace_payload_returns_default_name():
    assert decode_player_name(build_account(b"   \n\0\0")) == "Unnamed Profile"


def test_invalid_utf8_is_replaced():
    name = decode_player_name(build_account(b"Ace\xff\0"))
    assert name.startswith("Ace")
    assert "\ufffd" in name


def test_parse_account_header():
    account = parse_player_name_account(build_account(b"Nova\0\0", version=3, bump=251))
    assert account is not None
    assert account.version == 3
    assert account.bump == 251
    assert account.profile == PROFILE
    assert account.name == "Nova"


def test_parse_account_incomplete_header():
    assert parse_player_name_account(bytes(41)) is None
    assert parse_player_name_account(None) is None
