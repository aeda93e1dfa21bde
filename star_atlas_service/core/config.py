"""
Configuration management using Pydantic Settings.
Supports multiple environments: development, staging, production.
"""

from typing import Optional, List
from urllib.parse import quote
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROFILE_PUBKEY = "B9JCkYPmqCeBzVGNq6jXqXnFqazrCTUSvD4Kd4HTTH3m"


class Settings(BaseSettings):
    """Application settings with environment-based configuration."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "star-atlas-blockchain-service"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = Field(default="development")

    # API
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: List[str] = ["*"]
    cors_max_age: int = 3600

    # Solana
    solana_rpc_url: str = Field(default="https://api.mainnet-beta.solana.com")
    solana_commitment: str = "confirmed"
    solana_rpc_timeout: float = 30  # seconds
    rpc_worker_threads: int = 4
    player_profile_program_id: str = Field(
        default="pprofELXjL5Kck7Jn5hCpwAL82DpTkSYBENzahVtbc9"
    )

    # Star Atlas catalog API
    catalog_api_url: str = Field(default="https://galaxy.staratlas.com")
    catalog_timeout: float = 10  # seconds

    # Profile resolution
    profile_source: str = "chain"  # chain or static
    known_profile_pubkeys: List[str] = [DEFAULT_PROFILE_PUBKEY]
    resolve_profiles_concurrently: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # json or console
    log_file: Optional[str] = None

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = ["development", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("profile_source")
    @classmethod
    def validate_profile_source(cls, v: str) -> str:
        allowed = ["chain", "static"]
        if v.lower() not in allowed:
            raise ValueError(f"Profile source must be one of: {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Global settings instance
settings = Settings()


class StarAtlasConfig:
    """Star Atlas on-chain constants and client configuration."""

    # Seed prefix of the PlayerName account owned by the player profile program
    PLAYER_NAME_SEED = b"player_name"

    # PlayerName account layout
    VERSION_OFFSET = 8
    PROFILE_OFFSET = 9
    BUMP_OFFSET = 41
    NAME_OFFSET = 42  # 8 + 1 + 32 + 1

    UNNAMED_PROFILE = "Unnamed Profile"

    # Returned when no profile could be resolved at all
    FALLBACK_PROFILE = {
        "pubkey": DEFAULT_PROFILE_PUBKEY,
        "name": "Default Profile",
        "faction": "ONI",
        "crew_count": 100,
    }

    CREW_INVENTORY_PATH = "/crew/inventory/{profile_id}"

    @staticmethod
    def get_rpc_config() -> dict:
        """Get Solana RPC client configuration."""
        return {
            "endpoint": settings.solana_rpc_url,
            "commitment": settings.solana_commitment,
            "timeout": settings.solana_rpc_timeout,
        }

    @staticmethod
    def get_crew_inventory_url(profile_id: str) -> str:
        """Build the catalog URL for a profile's crew inventory."""
        base_url = settings.catalog_api_url.rstrip("/")
        return base_url + StarAtlasConfig.CREW_INVENTORY_PATH.format(
            profile_id=quote(profile_id, safe="")
        )
