"""
Skill vocabulary for roll commands.

Eighteen hyphenated skill names. Only twelve of them have an abbreviation.
"""

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

SKILLS: tuple[str, ...] = (
    "acrobatics",
    "animal-handling",
    "arcana",
    "athletics",
    "deception",
    "history",
    "insight",
    "intimidation",
    "investigation",
    "medicine",
    "nature",
    "perception",
    "performance",
    "persuasion",
    "religion",
    "sleight-of-hand",
    "stealth",
    "survival",
)

SKILL_ABBREVIATIONS: dict[str, str] = {
    "acr": "acrobatics",
    "ath": "athletics",
    "dec": "deception",
    "ins": "insight",
    "itm": "intimidation",
    "inv": "investigation",
    "prc": "perception",
    "prf": "performance",
    "per": "persuasion",
    "slh": "sleight-of-hand",
    "ste": "stealth",
    "sur": "survival",
}

# --- Lookup index built once at import time ---

_SKILL_SET: frozenset[str] = frozenset(SKILLS)


def normalize_skill(skill: str | Sequence[str]) -> str:
    """Normalize a skill name, abbreviation, or list of them.

    A list is normalized element-wise and joined with single spaces; an
    empty list gives an empty string. Unknown names are returned unchanged.

    Example:
        >>> normalize_skill("PRC")
        'perception'
        >>> normalize_skill(["acr", "ath"])
        'acrobatics athletics'
    """
    if not isinstance(skill, str):
        return " ".join(normalize_skill(s) for s in skill)

    lower = skill.lower()
    if lower in SKILL_ABBREVIATIONS:
        return SKILL_ABBREVIATIONS[lower]
    if lower in _SKILL_SET:
        return lower
    logger.debug(f"Unrecognized skill '{skill}', passing through")
    return skill


def is_skill(skill: str) -> bool:
    """Check whether a string names a skill.

    Full names must already be lowercase; abbreviations match in any case.
    """
    return skill in _SKILL_SET or skill.lower() in SKILL_ABBREVIATIONS
