"""
Player profile resolution.

Profiles come from a configured list of known profile addresses; discovering
the profiles owned by a wallet is not implemented yet. A profile source turns
those seeds into profiles, and the service guarantees a non-empty result.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from solders.pubkey import Pubkey
import structlog

from star_atlas_service.api.schemas.profiles import PlayerProfile
from star_atlas_service.core.config import settings, StarAtlasConfig
from star_atlas_service.core.exceptions import ProfileResolutionError
from star_atlas_service.services.player_name_resolver import PlayerNameResolver


logger = structlog.get_logger(__name__)


class ProfileSource(ABC):
    """Turns known profile addresses into profiles."""

    name: str = "abstract"

    @abstractmethod
    async def fetch_profiles(self, seeds: Sequence[str]) -> List[PlayerProfile]:
        """Resolve profiles for the given seeds; may return an empty list."""

    def close(self) -> None:
        """Release resources held by the source."""


class StaticProfileSource(ProfileSource):
    """Source without on-chain access; callers always get the fallback profile."""

    name = "static"

    async def fetch_profiles(self, seeds: Sequence[str]) -> List[PlayerProfile]:
        logger.debug("Static profile source, skipping on-chain lookups", seeds=len(seeds))
        return []


class ChainProfileSource(ProfileSource):
    """Reads profile names from their PlayerName accounts on Solana."""

    name = "chain"

    def __init__(
        self,
        resolver: Optional[PlayerNameResolver] = None,
        concurrent: Optional[bool] = None
    ):
        self.resolver = resolver or PlayerNameResolver()
        self.concurrent = (
            settings.resolve_profiles_concurrently if concurrent is None else concurrent
        )
        self.logger = logger.bind(service="chain_profile_source")

    async def _resolve_seed(self, seed: str) -> Optional[PlayerProfile]:
        try:
            profile_pubkey = Pubkey.from_string(seed)
        except ValueError as e:
            self.logger.error("Invalid profile pubkey", pubkey=seed, error=str(e))
            return None

        try:
            name = await self.resolver.resolve(profile_pubkey)
        except ProfileResolutionError as e:
            self.logger.error(
                "Error fetching name for profile",
                pubkey=seed,
                error=str(e),
                details=e.details
            )
            name = StarAtlasConfig.UNNAMED_PROFILE

        # Faction and crew count are not read from chain yet
        return PlayerProfile(pubkey=seed, name=name, faction=None, crew_count=0)

    async def fetch_profiles(self, seeds: Sequence[str]) -> List[PlayerProfile]:
        if self.concurrent:
            results = await asyncio.gather(*(self._resolve_seed(seed) for seed in seeds))
        else:
            results = [await self._resolve_seed(seed) for seed in seeds]
        return [profile for profile in results if profile is not None]

    def close(self) -> None:
        self.resolver.close()


def create_profile_source(source_name: Optional[str] = None) -> ProfileSource:
    """Build the profile source selected by configuration."""
    source_name = source_name or settings.profile_source
    if source_name == "static":
        return StaticProfileSource()
    if source_name == "chain":
        return ChainProfileSource()
    raise ValueError(f"Unknown profile source: {source_name}")


def fallback_profile() -> PlayerProfile:
    """Profile returned when nothing else could be resolved."""
    return PlayerProfile(**StarAtlasConfig.FALLBACK_PROFILE)


class PlayerProfileService:
    """Resolves the player profiles shown for a wallet."""

    def __init__(
        self,
        source: Optional[ProfileSource] = None,
        seeds: Optional[Sequence[str]] = None
    ):
        self.source = source or create_profile_source()
        self.seeds = list(seeds if seeds is not None else settings.known_profile_pubkeys)
        self.logger = logger.bind(service="player_profile_service", source=self.source.name)

    async def fetch_player_profiles(self, wallet_address: str) -> List[PlayerProfile]:
        """
        Fetch player profiles for a wallet.

        The wallet does not filter the result yet; profiles are resolved
        from the known profile list.

        Args:
            wallet_address: Wallet the caller asked about

        Returns:
            At least one profile
        """
        self.logger.info(
            "Resolving player profiles from known profiles",
            wallet=wallet_address,
            known_profiles=len(self.seeds)
        )

        profiles = await self.source.fetch_profiles(self.seeds)

        if not profiles:
            self.logger.warning("No profiles found, returning default profile", wallet=wallet_address)
            profiles = [fallback_profile()]

        return profiles

    def close(self) -> None:
        self.source.close()


# Global service instance
_profile_service: Optional[PlayerProfileService] = None


def get_player_profile_service() -> PlayerProfileService:
    """Get or create the global player profile service."""
    global _profile_service
    if _profile_service is None:
        _profile_service = PlayerProfileService()
    return _profile_service


def close_player_profile_service() -> None:
    """Close the global player profile service."""
    global _profile_service
    if _profile_service:
        _profile_service.close()
        _profile_service = None
