"""
Rule reference vocabulary for ``&Reference[...]`` enrichers.

Nine closed categories of rule names plus the open-ended ``rule`` category.
Reference names are camelCase (``animalHandling``), unlike the hyphenated
names used by roll commands, and carry their own abbreviation tables.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ReferenceCategory(str, Enum):
    """Category of a rule reference."""
    ABILITY = "ability"
    SKILL = "skill"
    CONDITION = "condition"
    CREATURE_TYPE = "creatureType"
    DAMAGE_TYPE = "damageType"
    AREA_OF_EFFECT = "areaOfEffect"
    SPELL_COMPONENT = "spellComponent"
    SPELL_SCHOOL = "spellSchool"
    OTHER_RULESET = "otherRuleset"
    RULE = "rule"


class ReferenceTable(BaseModel):
    """The closed set of rule names for one reference category.

    Attributes:
        category: Category these names belong to
        names: Canonical names, in display order
        abbreviations: Lowercase abbreviation to canonical name
    """
    model_config = ConfigDict(frozen=True)

    category: ReferenceCategory = Field(..., description="Reference category")
    names: tuple[str, ...] = Field(..., description="Canonical reference names")
    abbreviations: dict[str, str] = Field(default_factory=dict, description="Abbreviation map")


REFERENCE_TABLES: dict[ReferenceCategory, ReferenceTable] = {
    table.category: table
    for table in (
        ReferenceTable(
            category=ReferenceCategory.ABILITY,
            names=("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma"),
            abbreviations={
                "str": "strength",
                "dex": "dexterity",
                "con": "constitution",
                "int": "intelligence",
                "wis": "wisdom",
                "cha": "charisma",
            },
        ),
        ReferenceTable(
            category=ReferenceCategory.SKILL,
            names=(
                "acrobatics", "animalHandling", "arcana", "athletics", "deception",
                "history", "insight", "intimidation", "investigation", "medicine",
                "nature", "perception", "performance", "persuasion", "religion",
                "sleightOfHand", "stealth", "survival",
            ),
            abbreviations={
                "acr": "acrobatics",
                "ani": "animalHandling",
                "arc": "arcana",
                "ath": "athletics",
                "dec": "deception",
                "hist": "history",
                "ins": "insight",
                "itm": "intimidation",
                "inv": "investigation",
                "med": "medicine",
                "nat": "nature",
                "prc": "perception",
                "prf": "performance",
                "per": "persuasion",
                "rel": "religion",
                "slh": "sleightOfHand",
                "ste": "stealth",
                "sur": "survival",
            },
        ),
        ReferenceTable(
            category=ReferenceCategory.CONDITION,
            names=(
                "blinded", "charmed", "deafened", "exhaustion", "frightened",
                "grappled", "incapacitated", "invisible", "paralyzed", "petrified",
                "poisoned", "prone", "restrained", "stunned", "unconscious",
            ),
        ),
        ReferenceTable(
            category=ReferenceCategory.CREATURE_TYPE,
            names=(
                "aberration", "beast", "celestial", "construct", "dragon",
                "elemental", "fey", "fiend", "giant", "humanoid",
                "monstrosity", "ooze", "plant", "undead",
            ),
        ),
        ReferenceTable(
            category=ReferenceCategory.DAMAGE_TYPE,
            names=(
                "acid", "bludgeoning", "cold", "fire", "force", "lightning", "necrotic",
                "piercing", "poison", "psychic", "radiant", "slashing", "thunder",
            ),
        ),
        ReferenceTable(
            category=ReferenceCategory.AREA_OF_EFFECT,
            names=("cone", "cube", "sphere", "square", "line"),
        ),
        ReferenceTable(
            category=ReferenceCategory.SPELL_COMPONENT,
            names=("concentration", "material", "ritual", "somatic", "verbal"),
        ),
        ReferenceTable(
            category=ReferenceCategory.SPELL_SCHOOL,
            names=(
                "abjuration", "conjuration", "divination", "enchantment",
                "evocation", "illusion", "necromancy", "transmutation",
            ),
            abbreviations={
                "abj": "abjuration",
                "con": "conjuration",
                "div": "divination",
                "enc": "enchantment",
                "evo": "evocation",
                "ill": "illusion",
                "nec": "necromancy",
                "trs": "transmutation",
            },
        ),
        ReferenceTable(
            category=ReferenceCategory.OTHER_RULESET,
            names=(
                "inspiration", "carryingCapacity", "encumbrance", "hiding",
                "passivePerception", "falling", "suffocating", "lightlyObscured",
                "heavilyObscured", "brightLight",
            ),
        ),
    )
}

# Order in which an uncategorized name is matched against full names.
INFERENCE_ORDER: tuple[ReferenceCategory, ...] = (
    ReferenceCategory.CONDITION,
    ReferenceCategory.ABILITY,
    ReferenceCategory.SKILL,
    ReferenceCategory.DAMAGE_TYPE,
    ReferenceCategory.CREATURE_TYPE,
    ReferenceCategory.SPELL_SCHOOL,
    ReferenceCategory.AREA_OF_EFFECT,
    ReferenceCategory.SPELL_COMPONENT,
    ReferenceCategory.OTHER_RULESET,
)

# Abbreviations are tried before any full name, in this order.
_ABBREVIATION_ORDER: tuple[ReferenceCategory, ...] = (
    ReferenceCategory.ABILITY,
    ReferenceCategory.SKILL,
    ReferenceCategory.SPELL_SCHOOL,
)

# --- Lookup indexes built once at import time ---

_NAME_BY_LOWER: dict[ReferenceCategory, dict[str, str]] = {
    category: {name.lower(): name for name in table.names}
    for category, table in REFERENCE_TABLES.items()
}


def _lookup(lower: str, category: ReferenceCategory) -> str | None:
    table = REFERENCE_TABLES[category]
    if lower in table.abbreviations:
        return table.abbreviations[lower]
    return _NAME_BY_LOWER[category].get(lower)


def normalize_reference(name: str, category: ReferenceCategory | str | None = None) -> str | None:
    """Normalize a reference name, case-insensitively.

    With a category, only that category's table is consulted and ``None`` is
    returned when the name is not in it (the ``rule`` category accepts any
    name verbatim). Without a category, abbreviations are tried first, then
    full names in :data:`INFERENCE_ORDER`; an unmatched name is returned
    unchanged as a generic rule.

    Example:
        >>> normalize_reference("PRONE")
        'prone'
        >>> normalize_reference("ani", "skill")
        'animalHandling'
        >>> normalize_reference("fire", "condition") is None
        True
        >>> normalize_reference("Difficult Terrain")
        'Difficult Terrain'
    """
    lower = name.lower().strip()

    if category:
        category = ReferenceCategory(category)
        if category is ReferenceCategory.RULE:
            return name
        return _lookup(lower, category)

    for abbreviated in _ABBREVIATION_ORDER:
        abbreviations = REFERENCE_TABLES[abbreviated].abbreviations
        if lower in abbreviations:
            return abbreviations[lower]

    for candidate in INFERENCE_ORDER:
        found = _NAME_BY_LOWER[candidate].get(lower)
        if found:
            return found

    logger.debug(f"No reference category matches '{name}', treating it as a generic rule")
    return name


def infer_reference_category(name: str) -> ReferenceCategory | None:
    """Return the first category whose table contains ``name``.

    Uses the same precedence as :func:`normalize_reference`. Returns
    ``None`` for names that would be treated as generic rules.
    """
    lower = name.lower().strip()
    for abbreviated in _ABBREVIATION_ORDER:
        if lower in REFERENCE_TABLES[abbreviated].abbreviations:
            return abbreviated
    for candidate in INFERENCE_ORDER:
        if lower in _NAME_BY_LOWER[candidate]:
            return candidate
    return None


def is_reference(name: str, category: ReferenceCategory | str) -> bool:
    """Check whether ``name`` belongs to a closed reference category."""
    category = ReferenceCategory(category)
    if category is ReferenceCategory.RULE:
        return False
    return _lookup(name.lower().strip(), category) is not None


def is_condition(name: str) -> bool:
    """Check whether ``name`` is a condition, by full name only."""
    return name.lower() in _NAME_BY_LOWER[ReferenceCategory.CONDITION]
