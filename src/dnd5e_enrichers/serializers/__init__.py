"""
Serializers from option models to canonical command text.

Each command kind has its own serializer; :func:`serialize` dispatches on
the kind name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models import CommandKind, EnricherModel
from .attack import serialize_attack
from .basic import ROLL_MODE_COMMANDS, serialize_basic_roll
from .check import create_ability_check, create_skill_check, serialize_check
from .damage import serialize_damage
from .heal import serialize_heal
from .item import serialize_item
from .reference import serialize_reference
from .save import serialize_concentration, serialize_save

logger = logging.getLogger(__name__)


class UnknownCommandKindError(ValueError):
    """Raised when asked to serialize a kind that has no serializer."""


def serialize(
    kind: CommandKind | str,
    options: EnricherModel | Mapping[str, Any] | str | int | None = None,
) -> str:
    """Serialize ``options`` as a command of the given kind.

    Args:
        kind: One of the :class:`CommandKind` values.
        options: Options model, mapping, legacy scalar, or None.

    Returns:
        The canonical command text.

    Raises:
        UnknownCommandKindError: If ``kind`` is not a command kind.
        pydantic.ValidationError: If a mapping does not fit the kind's model.
    """
    try:
        kind = CommandKind(kind)
    except ValueError:
        raise UnknownCommandKindError(f"Unknown command kind: {kind!r}") from None

    logger.debug(f"Serializing {kind.value} command")
    if kind in (CommandKind.CHECK, CommandKind.SKILL, CommandKind.TOOL):
        return serialize_check(options, kind.value)
    if kind is CommandKind.ATTACK:
        return serialize_attack(options)
    if kind is CommandKind.DAMAGE:
        return serialize_damage(options)
    if kind is CommandKind.HEAL:
        return serialize_heal(options)
    if kind is CommandKind.SAVE:
        return serialize_save(options)
    if kind is CommandKind.CONCENTRATION:
        return serialize_concentration(options)
    if kind is CommandKind.ITEM:
        return serialize_item(options)
    if kind is CommandKind.ROLL:
        return serialize_basic_roll(options)
    return serialize_reference(options)


__all__ = [
    "ROLL_MODE_COMMANDS",
    "UnknownCommandKindError",
    "create_ability_check",
    "create_skill_check",
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
