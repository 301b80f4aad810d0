"""
Serializer for ability checks, skill checks and tool checks.

Produces ``[[/check ...]]``, ``[[/skill ...]]`` or ``[[/tool ...]]``. A few
simple combinations of ability, skill and numeric DC use positional
shorthand; everything else is rendered as ``key=value`` pairs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from ..models import CheckOptions
from ..vocabulary import is_ability, is_skill, normalize_ability, normalize_skill
from ._common import coerce_options, is_multiple, is_number, slash_join, wrap

logger = logging.getLogger(__name__)

CheckKind = Literal["check", "skill", "tool"]


def _skill_list(skill: str | tuple[str, ...]) -> list[str]:
    if isinstance(skill, str):
        return [normalize_skill(skill)]
    return [normalize_skill(s) for s in skill]


def _shorthand(opts: CheckOptions) -> list[str] | None:
    """Positional tokens for the first matching shorthand, or None."""
    has_other = any((opts.tool, opts.vehicle, opts.format, opts.passive, opts.activity, opts.rules))
    if has_other:
        return None

    ability = normalize_ability(opts.ability) if opts.ability else None
    single = isinstance(opts.skill, str) and bool(opts.skill)
    multiple = is_multiple(opts.skill)
    numeric_dc = is_number(opts.dc)

    # Ability alone wins even over a DC, which is then not rendered.
    if ability and not opts.skill:
        if opts.dc is not None:
            logger.debug(f"Dropping dc={opts.dc} from ability-only check shorthand")
        return [ability]
    if single and not ability and not opts.dc:
        return _skill_list(opts.skill)
    if single and numeric_dc and not ability:
        return [*_skill_list(opts.skill), str(opts.dc)]
    if ability and single and not opts.dc:
        return [ability, *_skill_list(opts.skill)]
    if multiple and not ability and not opts.dc:
        return _skill_list(opts.skill)
    if multiple and numeric_dc and not ability:
        return [*_skill_list(opts.skill), str(opts.dc)]
    if ability and multiple and numeric_dc:
        return [ability, *_skill_list(opts.skill), str(opts.dc)]
    return None


def _explicit(opts: CheckOptions) -> list[str]:
    parts: list[str] = []
    if opts.ability:
        parts.append(f"ability={normalize_ability(opts.ability)}")
    if opts.skill:
        parts.append(f"skill={'/'.join(_skill_list(opts.skill))}")
    if opts.tool:
        parts.append(f"tool={slash_join(opts.tool)}")
    if opts.vehicle:
        parts.append(f"vehicle={opts.vehicle}")
    if opts.dc is not None:
        parts.append(f"dc={opts.dc}")
    if opts.format:
        parts.append(f"format={opts.format}")
    if opts.passive:
        parts.append("passive=true")
    if opts.activity:
        parts.append(f"activity={opts.activity}")
    if opts.rules:
        parts.append(f"rules={opts.rules}")
    return parts


def serialize_check(
    options: CheckOptions | Mapping[str, Any] | str | int | None = None,
    kind: CheckKind = "check",
) -> str:
    """Serialize check options to ``[[/check]]``, ``[[/skill]]`` or ``[[/tool]]``.

    A bare string is a legacy shorthand: a known ability or skill is
    normalized, anything else is inserted verbatim.

    Example:
        >>> serialize_check({"ability": "dex"})
        '[[/check dexterity]]'
        >>> serialize_check({"skill": "prc", "dc": 15}, "skill")
        '[[/skill perception 15]]'
        >>> serialize_check({"ability": "strength", "dc": 15, "format": "long"})
        '[[/check ability=strength dc=15 format=long]]'
    """
    if isinstance(options, (str, int)) and not isinstance(options, bool):
        value = str(options)
        if is_ability(value):
            value = normalize_ability(value)
        elif is_skill(value):
            value = normalize_skill(value)
        return wrap(kind, [value] if value else [])

    opts = coerce_options(CheckOptions, options)
    if opts.is_empty():
        return wrap(kind, [])

    tokens = _shorthand(opts)
    if tokens is not None:
        return wrap(kind, tokens)
    return wrap(kind, _explicit(opts))


def create_skill_check(skill: str | list[str] | tuple[str, ...], **options: Any) -> str:
    """Build a ``[[/skill ...]]`` command for ``skill`` plus any other check options."""
    return serialize_check(CheckOptions(**options, skill=skill), "skill")


def create_ability_check(ability: str, **options: Any) -> str:
    """Build a ``[[/check ...]]`` command for ``ability`` plus any other check options."""
    return serialize_check(CheckOptions(**options, ability=ability), "check")
