"""
Normalization of crew records returned by the Star Atlas catalog API.

Upstream records are loosely typed. Every field degrades to its default on
its own, so a partial record still produces a crew member.
"""

import math
from typing import Any, Dict, Iterable, List, Optional

from star_atlas_service.api.schemas.crew import (
    CrewMember,
    DEFAULT_CREW_NAME,
    DEFAULT_RARITY,
    DEFAULT_TRAIT_VALUE,
    PERSONALITY_TRAITS,
)


MAX_U32 = 2**32 - 1

OPTIONAL_STRING_FIELDS = {
    "imageUrl": "image_url",
    "faction": "faction",
    "species": "species",
    "sex": "sex",
    "university": "university",
}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _str_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _as_number(value: Any) -> Optional[float]:
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    # NaN and infinities are accepted by json.loads but are not usable values
    return number if math.isfinite(number) else None


def _as_u32(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0 or value > MAX_U32:
        return None
    return value


def _as_aptitudes(value: Any) -> Optional[Dict[str, str]]:
    if not isinstance(value, dict):
        return None
    return {
        str(key): aptitude if isinstance(aptitude, str) else ""
        for key, aptitude in value.items()
    }


def normalize_crew_member(raw: Any) -> CrewMember:
    """
    Map one catalog record onto a CrewMember.

    Args:
        raw: One element of the catalog ``crew`` array

    Returns:
        CrewMember with defaults filled in for missing or mistyped fields
    """
    record = raw if isinstance(raw, dict) else {}

    fields: Dict[str, Any] = {
        "das_id": _str_or(record.get("_id"), ""),
        "mint_offset": _as_u32(record.get("mintOffset")),
        "name": _str_or(record.get("name"), DEFAULT_CREW_NAME),
        "age": _as_number(record.get("age")),
        "rarity": _str_or(record.get("rarity"), DEFAULT_RARITY),
        "aptitudes": _as_aptitudes(record.get("aptitudes")),
    }

    for source_key, target in OPTIONAL_STRING_FIELDS.items():
        fields[target] = _as_str(record.get(source_key))

    for trait in PERSONALITY_TRAITS:
        value = _as_number(record.get(trait))
        fields[trait] = DEFAULT_TRAIT_VALUE if value is None else value

    return CrewMember(**fields)


def normalize_crew_list(records: Iterable[Any]) -> List[CrewMember]:
    """Normalize a whole catalog ``crew`` array."""
    return [normalize_crew_member(record) for record in records]
