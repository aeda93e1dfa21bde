"""
Test player profile resolution and the fallback profile.
"""

import asyncio

import pytest
from solders.pubkey import Pubkey

from star_atlas_service.core.exceptions import ProfileResolutionError
from star_atlas_service.services.profile_service import (
    ChainProfileSource,
    PlayerProfileService,
    StaticProfileSource,
    create_profile_source,
)


FALLBACK_PUBKEY = "B9JCkYPmqCeBzVGNq6jXqXnFqazrCTUSvD4Kd4HTTH3m"
SEEDS = [
    "11111111111111111111111111111112",
    "SysvarC1ock11111111111111111111111111111111",
    "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
]


class FakeResolver:
    def __init__(self, names=None, delays=None, fail=()):
        self.names = names or {}
        self.delays = delays or {}
        self.fail = set(fail)
        self.calls = []
        self.closed = False

    async def resolve(self, profile_pubkey: Pubkey) -> str:
        key = str(profile_pubkey)
        self.calls.append(key)
        await asyncio.sleep(self.delays.get(key, 0))
        if key in self.fail:
            raise ProfileResolutionError("worker failed", {"stage": "fetch_player_name"})
        return self.names.get(key, "Unnamed Profile")

    def close(self):
        self.closed = True


def assert_fallback(profiles):
    assert len(profiles) == 1
    profile = profiles[0]
    assert profile.pubkey == FALLBACK_PUBKEY
    assert profile.name == "Default Profile"
    assert profile.faction == "ONI"
    assert profile.crew_count == 100


@pytest.mark.asyncio
async def test_all_malformed_seeds_return_fallback():
    resolver = FakeResolver()
    service = PlayerProfileService(
        source=ChainProfileSource(resolver=resolver, concurrent=False),
        seeds=["not-a-pubkey", "", "0OIl"]
    )

    assert_fallback(await service.fetch_player_profiles("wallet"))
    assert resolver.calls == []


@pytest.mark.asyncio
async def test_valid_seeds_resolve_in_order():
    names = {seed: f"Pilot {i}" for i, seed in enumerate(SEEDS)}
    service = PlayerProfileService(
        source=ChainProfileSource(resolver=FakeResolver(names), concurrent=False),
        seeds=SEEDS
    )

    profiles = await service.fetch_player_profiles("wallet")

    assert [p.pubkey for p in profiles] == SEEDS
    assert [p.name for p in profiles] == ["Pilot 0", "Pilot 1", "Pilot 2"]
    assert all(p.faction is None and p.crew_count == 0 for p in profiles)


@pytest.mark.asyncio
async def test_concurrent_resolution_keeps_seed_order():
    delays = {SEEDS[0]: 0.03, SEEDS[1]: 0.0, SEEDS[2]: 0.01}
    service = PlayerProfileService(
        source=ChainProfileSource(resolver=FakeResolver(delays=delays), concurrent=True),
        seeds=SEEDS
    )

    profiles = await service.fetch_player_profiles("wallet")

    assert [p.pubkey for p in profiles] == SEEDS


@pytest.mark.asyncio
async def test_malformed_seed_is_skipped():
    service = PlayerProfileService(
        source=ChainProfileSource(resolver=FakeResolver(), concurrent=False),
        seeds=[SEEDS[0], "bad seed", SEEDS[1]]
    )

    profiles = await service.fetch_player_profiles("wallet")

    assert [p.pubkey for p in profiles] == SEEDS[:2]


@pytest.mark.asyncio
async def test_resolution_error_degrades_to_default_name():
    service = PlayerProfileService(
        source=ChainProfileSource(resolver=FakeResolver(fail=[SEEDS[0]]), concurrent=False),
        seeds=SEEDS[:1]
    )

    profiles = await service.fetch_player_profiles("wallet")

    assert len(profiles) == 1
    assert profiles[0].name == "Unnamed Profile"


@pytest.mark.asyncio
async def test_wallet_does_not_filter_profiles():
    service = PlayerProfileService(
        source=ChainProfileSource(resolver=FakeResolver(), concurrent=False),
        seeds=SEEDS
    )

    first = await service.fetch_player_profiles("walletA")
    second = await service.fetch_player_profiles("walletB")

    assert first == second


@pytest.mark.asyncio
async def test_static_source_always_returns_fallback():
    service = PlayerProfileService(source=StaticProfileSource(), seeds=SEEDS)

    assert_fallback(await service.fetch_player_profiles("wallet"))


def test_profile_is_immutable():
    profile = PlayerProfileService(source=StaticProfileSource(), seeds=[])
    fallback = asyncio.run(profile.fetch_player_profiles("wallet"))[0]

    with pytest.raises(Exception):
        fallback.name = "Changed"


def test_profile_serializes_crew_count_alias():
    service = PlayerProfileService(source=StaticProfileSource(), seeds=[])
    payload = asyncio.run(service.fetch_player_profiles("wallet"))[0].model_dump(by_alias=True)

    assert payload == {
        "pubkey": FALLBACK_PUBKEY,
        "name": "Default Profile",
        "faction": "ONI",
        "crewCount": 100,
    }


def test_create_profile_source():
    assert isinstance(create_profile_source("static"), StaticProfileSource)
    source = create_profile_source("chain")
    assert isinstance(source, ChainProfileSource)
    source.close()

    with pytest.raises(ValueError):
        create_profile_source("mock")


def test_close_releases_resolver():
    resolver = FakeResolver()
    service = PlayerProfileService(source=ChainProfileSource(resolver=resolver), seeds=[])

    service.close()

    assert resolver.closed
