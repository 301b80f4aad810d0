"""Serializer for ``[[/damage ...]]`` commands, including multi-part rolls."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import DamageOptions, DamagePart
from ._common import coerce_options, render_value, slash_join, wrap


def _space_join(value: str | tuple[str, ...]) -> str:
    return value if isinstance(value, str) else " ".join(value)


def _render_part(part: DamagePart) -> str:
    if part.type:
        return f"{part.formula} {_space_join(part.type)}"
    return part.formula


def serialize_damage(options: DamageOptions | Mapping[str, Any] | str | None = None) -> str:
    """Serialize damage options to a ``[[/damage]]`` command.

    Shorthand ``formula type... [average]`` is used unless an activity, a
    format or a non-boolean average is given. ``rolls`` renders every part
    joined by ``&`` with the average and format options shared at the end.

    Example:
        >>> serialize_damage({"formula": "2d6", "type": "fire", "average": True})
        '[[/damage 2d6 fire average]]'
        >>> serialize_damage({"formula": "1d4", "type": ["fire", "cold"], "average": 3})
        '[[/damage formula=1d4 type=fire/cold average=3]]'
    """
    if isinstance(options, str):
        return wrap("damage", [options] if options else [])

    opts = coerce_options(DamageOptions, options)
    if opts.is_empty():
        return wrap("damage", [])

    if opts.activity and not opts.formula and not opts.rolls:
        return wrap("damage", [f"activity={opts.activity}"])

    if opts.rolls:
        parts = [" & ".join(_render_part(part) for part in opts.rolls)]
        if opts.average is True:
            parts.append("average")
        elif opts.average is not None:
            parts.append(f"average={render_value(opts.average)}")
        if opts.format:
            parts.append(f"format={opts.format}")
        return wrap("damage", parts)

    complex_options = opts.activity or opts.format or (opts.average is not None and opts.average is not True)
    if not complex_options and opts.formula:
        parts = [opts.formula]
        if opts.type:
            parts.append(_space_join(opts.type))
        if opts.average is True:
            parts.append("average")
        return wrap("damage", parts)

    parts = []
    if opts.formula:
        parts.append(f"formula={opts.formula}")
    if opts.type:
        parts.append(f"type={slash_join(opts.type)}")
    if opts.average is not None:
        parts.append(f"average={render_value(opts.average)}")
    if opts.activity:
        parts.append(f"activity={opts.activity}")
    if opts.format:
        parts.append(f"format={opts.format}")
    return wrap("damage", parts)
