"""
D&D 5e Enrichers - serialize and parse dnd5e roll commands and rule references.
"""

from .models import *
from .parser import parse_command
from .scanner import enhance_text, find_commands
from .serializers import (
    UnknownCommandKindError,
    create_ability_check,
    create_skill_check,
    serialize,
    serialize_attack,
    serialize_basic_roll,
    serialize_check,
    serialize_concentration,
    serialize_damage,
    serialize_heal,
    serialize_item,
    serialize_reference,
    serialize_save,
)
from .vocabulary import (
    infer_reference_category,
    is_ability,
    is_reference,
    is_skill,
    normalize_ability,
    normalize_reference,
    normalize_skill,
)

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("dnd5e-enrichers")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "AttackOptions",
    "BasicRollOptions",
    "CheckOptions",
    "CommandKind",
    "DamageOptions",
    "DamagePart",
    "DiceDescription",
    "HealOptions",
    "ItemOptions",
    "ParsedCommand",
    "ReferenceOptions",
    "SaveOptions",
    "UnknownCommandKindError",
    "create_ability_check",
    "create_skill_check",
    "enhance_text",
    "find_commands",
    "infer_reference_category",
    "is_ability",
    "is_reference",
    "is_skill",
    "normalize_ability",
    "normalize_reference",
    "normalize_skill",
    "parse_command",
    "serialize",
    "serialize_attack",
    "serialize_basic_roll",
    "serialize_check",
    "serialize_concentration",
    "serialize_damage",
    "serialize_heal",
    "serialize_item",
    "serialize_reference",
    "serialize_save",
]
