"""
Ability vocabulary for roll commands.

The six D&D ability scores with their three-letter abbreviations.
"""

import logging

logger = logging.getLogger(__name__)

ABILITIES: tuple[str, ...] = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)

ABILITY_ABBREVIATIONS: dict[str, str] = {
    "str": "strength",
    "dex": "dexterity",
    "con": "constitution",
    "int": "intelligence",
    "wis": "wisdom",
    "cha": "charisma",
}

# --- Lookup index built once at import time ---

_ABILITY_SET: frozenset[str] = frozenset(ABILITIES)


def normalize_ability(ability: str) -> str:
    """Normalize an ability name or abbreviation to its canonical form.

    Matching is case-insensitive and abbreviations are checked first.
    Unknown values are returned unchanged so custom abilities pass through.

    Example:
        >>> normalize_ability("DEX")
        'dexterity'
        >>> normalize_ability("Wisdom")
        'wisdom'
        >>> normalize_ability("sanity")
        'sanity'
    """
    lower = ability.lower()
    if lower in ABILITY_ABBREVIATIONS:
        return ABILITY_ABBREVIATIONS[lower]
    if lower in _ABILITY_SET:
        return lower
    logger.debug(f"Unrecognized ability '{ability}', passing through")
    return ability


def is_ability(ability: str) -> bool:
    """Check whether a string names an ability.

    Full names must already be lowercase; abbreviations match in any case.
    """
    return ability in _ABILITY_SET or ability.lower() in ABILITY_ABBREVIATIONS
