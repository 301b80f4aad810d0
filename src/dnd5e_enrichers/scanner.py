"""
Document-level helpers: find every command in a text, and turn common rules
prose into commands.
"""

from __future__ import annotations

import logging
import re

from .models import CheckOptions, CommandKind, ParsedCommand, SaveOptions
from .parser import parse_command
from .serializers import serialize_check, serialize_save
from .vocabulary import normalize_ability, normalize_skill

logger = logging.getLogger(__name__)

# Candidate spans; parse_command decides whether each one is a command.
# A body never contains ``[[``, so a stray opener cannot swallow the next command.
_CANDIDATE = re.compile(r"&Reference\[[^\]]*\]|\[\[(?:(?!\[\[)[^\]])*\]\](\{[^}]+\})?")

PASSIVE_CHECK_PATTERN = re.compile(
    r"passive\s+([A-Za-z]+)\s+\(([^)]+)\)\s+score\s+of\s+(\d+)\s+or\s+higher",
    re.IGNORECASE,
)
SAVING_THROW_PATTERN = re.compile(r"DC\s+(\d+)\s+([A-Za-z]+)\s+saving\s+throw", re.IGNORECASE)
DC_CHECK_PATTERN = re.compile(r"DC\s+(\d+)\s+([A-Za-z]+)\s+\(([^)]+)\)", re.IGNORECASE)


def find_commands(text: str) -> list[ParsedCommand]:
    """Return every recognizable command in ``text``, in order of appearance.

    Each result's ``original_text`` is the matched span. A ``{label}`` after
    a non-roll command is not part of that command.
    """
    found: list[ParsedCommand] = []
    for match in _CANDIDATE.finditer(text):
        span = match.group(0)
        parsed = parse_command(span)
        if match.group(1) and (parsed is None or parsed.kind is not CommandKind.ROLL):
            span = span[: -len(match.group(1))]
            parsed = parse_command(span)
        if parsed is not None:
            found.append(parsed)
    logger.debug(f"Found {len(found)} commands in {len(text)} characters of text")
    return found


def _skill_name(text: str) -> str:
    """``Sleight of Hand`` -> ``sleight-of-hand``."""
    return normalize_skill("-".join(text.strip().lower().split()))


def enhance_text(text: str) -> str:
    """Rewrite D&D rules prose into roll commands.

    Handles, in this order:

    - ``passive Wisdom (Perception) score of 16 or higher``
    - ``DC 10 Dexterity saving throw``
    - ``DC 15 Wisdom (Insight)``

    Example:
        >>> enhance_text("a DC 13 Dex saving throw")
        'a [[/save dexterity 13]]'
        >>> enhance_text("succeed on a DC 15 Wisdom (Insight) check")
        'succeed on a [[/skill insight 15]] check'
    """
    text = PASSIVE_CHECK_PATTERN.sub(
        lambda m: serialize_check(
            CheckOptions(skill=_skill_name(m.group(2)), dc=int(m.group(3)), format="long", passive=True),
            "skill",
        ),
        text,
    )
    text = SAVING_THROW_PATTERN.sub(
        lambda m: serialize_save(SaveOptions(ability=normalize_ability(m.group(2)), dc=int(m.group(1)))),
        text,
    )
    text = DC_CHECK_PATTERN.sub(
        lambda m: serialize_check(CheckOptions(skill=_skill_name(m.group(3)), dc=int(m.group(1))), "skill"),
        text,
    )
    return text
