"""
Player profile name resolution from the Solana blockchain.

The solana-py ``Client`` is synchronous, so every account fetch runs on a
dedicated thread pool and never blocks the event loop.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from solana.rpc.api import Client
from solana.rpc.commitment import Commitment
from solders.pubkey import Pubkey
import structlog

from star_atlas_service.chain.pda import derive_player_name_pda, get_program_id
from star_atlas_service.chain.player_name import decode_player_name, parse_player_name_account
from star_atlas_service.core.config import settings, StarAtlasConfig
from star_atlas_service.core.exceptions import ConfigurationError, ProfileResolutionError


logger = structlog.get_logger(__name__)


class PlayerNameResolver:
    """
    Resolves a player profile address to its on-chain display name.

    Missing accounts and RPC failures are not errors: they resolve to
    "Unnamed Profile". Only configuration errors and worker failures escape.
    """

    def __init__(
        self,
        client: Optional[Client] = None,
        program_id: Optional[Pubkey] = None,
        max_workers: Optional[int] = None
    ):
        """Initialize the resolver with an optional pre-built RPC client."""
        self.client = client if client is not None else self._create_client()
        self.program_id = program_id
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or settings.rpc_worker_threads,
            thread_name_prefix="solana-rpc"
        )
        self.logger = logger.bind(service="player_name_resolver")

    @staticmethod
    def _create_client() -> Client:
        """Build the RPC client shared by all worker threads."""
        rpc_config = StarAtlasConfig.get_rpc_config()
        return Client(
            rpc_config["endpoint"],
            commitment=Commitment(rpc_config["commitment"]),
            timeout=rpc_config["timeout"]
        )

    def get_player_name_sync(self, profile_pubkey: Pubkey) -> str:
        """Fetch and decode the PlayerName account (blocking)."""
        program_id = self.program_id or get_program_id()
        player_name_pda, bump = derive_player_name_pda(profile_pubkey, program_id)
        self.logger.debug(
            "PlayerName PDA derived",
            profile=str(profile_pubkey),
            pda=str(player_name_pda),
            bump=bump
        )

        try:
            response = self.client.get_account_info(player_name_pda)
            account = response.value
        except Exception as e:
            self.logger.warning(
                "PlayerName account fetch failed",
                profile=str(profile_pubkey),
                pda=str(player_name_pda),
                error=str(e)
            )
            return StarAtlasConfig.UNNAMED_PROFILE

        if account is None:
            self.logger.debug(
                "PlayerName account not found",
                profile=str(profile_pubkey),
                pda=str(player_name_pda)
            )
            return StarAtlasConfig.UNNAMED_PROFILE

        data = bytes(account.data)
        if len(data) <= StarAtlasConfig.NAME_OFFSET:
            self.logger.warning(
                "PlayerName account data too short",
                profile=str(profile_pubkey),
                data_size=len(data)
            )
            return StarAtlasConfig.UNNAMED_PROFILE

        name = decode_player_name(data)
        parsed = parse_player_name_account(data)
        if parsed.profile != profile_pubkey:
            self.logger.warning(
                "PlayerName account references another profile",
                profile=str(profile_pubkey),
                account_profile=str(parsed.profile)
            )
        self.logger.info("Found profile name", profile=str(profile_pubkey), name=name)
        return name

    async def resolve(self, profile_pubkey: Pubkey) -> str:
        """
        Resolve a profile name without blocking the event loop.

        Args:
            profile_pubkey: Player profile account address

        Returns:
            Profile name or "Unnamed Profile"

        Raises:
            ConfigurationError: If the program id is misconfigured
            ProfileResolutionError: If the worker task failed
        """
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                self._executor, self.get_player_name_sync, profile_pubkey
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise ProfileResolutionError(
                f"Player name task failed for {profile_pubkey}: {e}",
                {"profile": str(profile_pubkey), "stage": "fetch_player_name"}
            ) from e

    def close(self) -> None:
        """Shut down the worker pool."""
        self._executor.shutdown(wait=False)
