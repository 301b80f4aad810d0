"""
Serializer for plain dice rolls.

Regular rolls use a command word chosen by roll mode (``/roll``,
``/publicroll``, ``/gmroll``, ``/blindroll``, ``/selfroll``). Inline rolls
render as ``[[formula]]`` (immediate) or ``[[/roll formula]]`` (deferred),
optionally followed by a ``{label}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import BasicRollOptions
from ._common import coerce_options, wrap

ROLL_MODE_COMMANDS: dict[str, str] = {
    "public": "publicroll",
    "gm": "gmroll",
    "blind": "blindroll",
    "self": "selfroll",
}


def _formula(opts: BasicRollOptions) -> str:
    if opts.dice_descriptions:
        return "+".join(f"{d.formula}[{d.description}]" for d in opts.dice_descriptions)
    return opts.formula or ""


def serialize_basic_roll(options: BasicRollOptions | Mapping[str, Any] | str | None = None) -> str:
    """Serialize basic roll options.

    Dice descriptions replace the formula when present. The label is only
    rendered for inline rolls, and deferred inline rolls ignore the mode.

    Example:
        >>> serialize_basic_roll({"formula": "5d20", "description": "This is my roll!"})
        '[[/roll 5d20 # This is my roll!]]'
        >>> serialize_basic_roll({"formula": "1d20", "inline": "immediate", "label": "Go"})
        '[[1d20]]{Go}'
        >>> serialize_basic_roll({"formula": "1d20", "mode": "gm"})
        '[[/gmroll 1d20]]'
    """
    if isinstance(options, str):
        return wrap("roll", [options] if options else [])

    opts = coerce_options(BasicRollOptions, options)
    if opts.is_empty():
        return wrap("roll", [])

    formula = _formula(opts)
    label = f"{{{opts.label}}}" if opts.label else ""

    if opts.inline == "immediate":
        return f"[[{formula}]]{label}" if formula else "[[]]"
    if opts.inline == "deferred":
        return f"[[/roll {formula}]]{label}" if formula else "[[]]"

    parts = [formula] if formula else []
    if opts.description:
        parts.append(f"# {opts.description}")
    return wrap(ROLL_MODE_COMMANDS.get(opts.mode, "roll"), parts)
