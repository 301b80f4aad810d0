"""Serializer for ``[[/attack ...]]`` commands."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ..models import AttackOptions
from ..vocabulary import is_ability, normalize_ability
from ._common import coerce_options, is_number, wrap

_SIGNED = re.compile(r"^[+-]")


def _signed(number: int) -> str:
    return f"+{number}" if number >= 0 else str(number)


def serialize_attack(options: AttackOptions | Mapping[str, Any] | str | int | None = None) -> str:
    """Serialize attack options to an ``[[/attack]]`` command.

    Numeric formulas are rendered with an explicit sign. A string formula
    only qualifies for shorthand when it already starts with ``+`` or ``-``.
    A bare ability name uses the legacy ``@attack[ability]`` syntax.

    Example:
        >>> serialize_attack({"formula": 5})
        '[[/attack +5]]'
        >>> serialize_attack({"formula": 5, "attack_mode": "thrown"})
        '[[/attack 5 thrown]]'
        >>> serialize_attack("str")
        '@attack[strength]'
    """
    if isinstance(options, str):
        if is_ability(options):
            return f"@attack[{normalize_ability(options)}]"
        return wrap("attack", [options] if options else [])
    if is_number(options):
        return wrap("attack", [_signed(options)])

    opts = coerce_options(AttackOptions, options)
    if opts.is_empty():
        return wrap("attack", [])

    formula = opts.formula
    if opts.format and formula is None and not (opts.activity or opts.attack_mode or opts.rules):
        return wrap("attack", [opts.format])

    if formula is not None and not (opts.activity or opts.format or opts.rules):
        if not opts.attack_mode:
            text = _signed(formula) if is_number(formula) else formula
            if _SIGNED.match(text):
                return wrap("attack", [text])
        else:
            text = str(formula) if is_number(formula) else _SIGNED.sub("", formula, count=1)
            return wrap("attack", [text, opts.attack_mode])

    parts: list[str] = []
    if formula is not None:
        if is_number(formula):
            parts.append(f"formula={_signed(formula)}")
        elif _SIGNED.match(formula):
            parts.append(formula)
        else:
            parts.append(f"formula={formula}")
    if opts.activity:
        parts.append(f"activity={opts.activity}")
    if opts.attack_mode:
        parts.append(f"attackMode={opts.attack_mode}")
    if opts.format:
        parts.append(f"format={opts.format}")
    if opts.rules:
        parts.append(f"rules={opts.rules}")
    return wrap("attack", parts)
