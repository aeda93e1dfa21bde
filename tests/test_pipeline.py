"""
Test the pipeline entry points backed by the global services.
"""

import pytest

from star_atlas_service import services
from star_atlas_service.services import crew_service, profile_service
from star_atlas_service.services.crew_catalog import CrewCatalogClient
from star_atlas_service.services.crew_service import CrewService
from star_atlas_service.services.profile_service import PlayerProfileService, StaticProfileSource
from tests.fakes import FakeResponse, FakeSession


@pytest.mark.asyncio
async def test_resolve_crew_list_uses_global_service(monkeypatch):
    session = FakeSession(FakeResponse(200, {"crew": [{"_id": "a"}, {"_id": "b"}]}))
    monkeypatch.setattr(
        crew_service, "_crew_service", CrewService(CrewCatalogClient(session_factory=session))
    )

    crew = await services.resolve_crew_list("profile-1")

    assert [member.das_id for member in crew] == ["a", "b"]
    assert session.requested[0].endswith("/crew/inventory/profile-1")


@pytest.mark.asyncio
async def test_resolve_player_profiles_uses_global_service(monkeypatch):
    monkeypatch.setattr(
        profile_service,
        "_profile_service",
        PlayerProfileService(source=StaticProfileSource(), seeds=[])
    )

    profiles = await services.resolve_player_profiles("wallet")

    assert [p.name for p in profiles] == ["Default Profile"]


def test_global_services_are_created_once(monkeypatch):
    monkeypatch.setattr(crew_service, "_crew_service", None)

    assert crew_service.get_crew_service() is crew_service.get_crew_service()


def test_close_player_profile_service(monkeypatch):
    monkeypatch.setattr(
        profile_service,
        "_profile_service",
        PlayerProfileService(source=StaticProfileSource(), seeds=[])
    )

    profile_service.close_player_profile_service()

    assert profile_service._profile_service is None
