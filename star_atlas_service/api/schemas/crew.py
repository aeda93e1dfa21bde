"""
Crew member schemas.
Field names are camelCase on the wire.
"""

from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DEFAULT_TRAIT_VALUE = 0.5
DEFAULT_CREW_NAME = "Unknown"
DEFAULT_RARITY = "Common"

PERSONALITY_TRAITS = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
)


class CrewMember(BaseModel):
    """Crew member from the Star Atlas crew inventory."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    das_id: str = ""
    mint_offset: Optional[int] = Field(default=None, ge=0, le=2**32 - 1)
    name: str = DEFAULT_CREW_NAME
    image_url: Optional[str] = None
    faction: Optional[str] = None
    species: Optional[str] = None
    sex: Optional[str] = None
    university: Optional[str] = None
    age: Optional[float] = None

    # Big Five personality traits, always present
    openness: float = DEFAULT_TRAIT_VALUE
    conscientiousness: float = DEFAULT_TRAIT_VALUE
    extraversion: float = DEFAULT_TRAIT_VALUE
    agreeableness: float = DEFAULT_TRAIT_VALUE
    neuroticism: float = DEFAULT_TRAIT_VALUE

    rarity: str = DEFAULT_RARITY
    aptitudes: Optional[Dict[str, str]] = None
