"""
D&D 5e vocabulary tables for roll commands and rule references.

Provides O(1) case-insensitive normalization for abilities, skills and
reference names, with pass-through for unrecognized house-rule names.
"""

from .abilities import ABILITIES, ABILITY_ABBREVIATIONS, is_ability, normalize_ability
from .references import (
    INFERENCE_ORDER,
    REFERENCE_TABLES,
    ReferenceCategory,
    ReferenceTable,
    infer_reference_category,
    is_condition,
    is_reference,
    normalize_reference,
)
from .skills import SKILL_ABBREVIATIONS, SKILLS, is_skill, normalize_skill

__all__ = [
    "ABILITIES",
    "ABILITY_ABBREVIATIONS",
    "INFERENCE_ORDER",
    "REFERENCE_TABLES",
    "ReferenceCategory",
    "ReferenceTable",
    "SKILLS",
    "SKILL_ABBREVIATIONS",
    "infer_reference_category",
    "is_ability",
    "is_condition",
    "is_reference",
    "is_skill",
    "normalize_ability",
    "normalize_reference",
    "normalize_skill",
]
