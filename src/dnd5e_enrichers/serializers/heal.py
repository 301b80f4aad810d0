"""Serializer for ``[[/heal ...]]`` commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import HealOptions
from ._common import coerce_options, render_value, wrap

_TEMP_TYPES = ("temp", "temphp")


def serialize_heal(options: HealOptions | Mapping[str, Any] | str | None = None) -> str:
    """Serialize heal options to a ``[[/heal]]`` command.

    Temporary hit points are written ``temp`` in shorthand and
    ``type=temphp`` in explicit form. An explicit ``healing`` type always
    forces the explicit form.

    Example:
        >>> serialize_heal({"formula": "10", "type": "temphp"})
        '[[/heal 10 temp]]'
        >>> serialize_heal({"formula": "2d4", "type": "healing"})
        '[[/heal formula=2d4 type=healing]]'
    """
    if isinstance(options, str):
        return wrap("heal", [options] if options else [])

    opts = coerce_options(HealOptions, options)
    if opts.is_empty():
        return wrap("heal", [])

    if opts.activity and not opts.formula:
        return wrap("heal", [f"activity={opts.activity}"])

    complex_options = (
        opts.activity
        or opts.format
        or (opts.average is not None and opts.average is not True)
        or opts.type == "healing"
    )
    if not complex_options and opts.formula:
        parts = [opts.formula]
        if opts.type in _TEMP_TYPES:
            parts.append("temp")
        if opts.average is True:
            parts.append("average")
        return wrap("heal", parts)

    parts = []
    if opts.formula:
        parts.append(f"formula={opts.formula}")
    if opts.type:
        parts.append(f"type={'temphp' if opts.type in _TEMP_TYPES else opts.type}")
    if opts.average is not None:
        parts.append(f"average={render_value(opts.average)}")
    if opts.activity:
        parts.append(f"activity={opts.activity}")
    if opts.format:
        parts.append(f"format={opts.format}")
    return wrap("heal", parts)
