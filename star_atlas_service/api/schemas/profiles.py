"""
Player profile schemas.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PlayerProfile(BaseModel):
    """Read-only view of a Star Atlas player profile."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pubkey: str = Field(description="Player profile account address (base58)")
    name: Optional[str] = None
    faction: Optional[str] = None
    crew_count: int = Field(default=0, ge=0, le=2**32 - 1, alias="crewCount")
