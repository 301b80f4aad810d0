"""Serializer for saving throws and concentration saves."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import SaveOptions
from ..vocabulary import is_ability, normalize_ability
from ._common import coerce_options, is_multiple, is_number, wrap


def _abilities(ability: str | tuple[str, ...]) -> list[str]:
    if isinstance(ability, str):
        return [normalize_ability(ability)]
    return [normalize_ability(a) for a in ability]


def serialize_save(
    options: SaveOptions | Mapping[str, Any] | str | None = None,
    concentration: bool = False,
) -> str:
    """Serialize save options to ``[[/save]]``, or ``[[/concentration]]`` when asked.

    Example:
        >>> serialize_save({"ability": "dex", "dc": 15})
        '[[/save dexterity 15]]'
        >>> serialize_save({"ability": ["str", "dex"], "dc": "@abilities.con.dc"})
        '[[/save ability=strength/dexterity dc=@abilities.con.dc]]'
        >>> serialize_save({"dc": 15}, concentration=True)
        '[[/concentration dc=15]]'
    """
    keyword = "concentration" if concentration else "save"

    if isinstance(options, str):
        value = normalize_ability(options) if is_ability(options) else options
        return wrap(keyword, [value] if value else [])

    opts = coerce_options(SaveOptions, options)
    if opts.is_empty():
        return wrap(keyword, [])

    has_other = opts.format is not None or opts.activity is not None or opts.dc is not None
    single = isinstance(opts.ability, str) and bool(opts.ability)
    multiple = is_multiple(opts.ability)
    numeric_dc = is_number(opts.dc)
    plain = not opts.format and not opts.activity

    if single and not has_other:
        return wrap(keyword, _abilities(opts.ability))
    if single and numeric_dc and plain:
        return wrap(keyword, [*_abilities(opts.ability), str(opts.dc)])
    if multiple and not has_other:
        return wrap(keyword, _abilities(opts.ability))
    if multiple and numeric_dc and plain:
        return wrap(keyword, [*_abilities(opts.ability), str(opts.dc)])

    parts: list[str] = []
    if opts.ability:
        parts.append(f"ability={'/'.join(_abilities(opts.ability))}")
    if opts.dc is not None:
        parts.append(f"dc={opts.dc}")
    if opts.format:
        parts.append(f"format={opts.format}")
    if opts.activity:
        parts.append(f"activity={opts.activity}")
    return wrap(keyword, parts)


def serialize_concentration(options: SaveOptions | Mapping[str, Any] | str | None = None) -> str:
    """Serialize a ``[[/concentration]]`` save."""
    return serialize_save(options, concentration=True)
