"""
Parse command text back into option models.

:func:`parse_command` recognizes a single command in a piece of text and
returns a :class:`~dnd5e_enrichers.models.ParsedCommand`, or ``None`` when
the text holds no recognizable command. Parsing never raises on malformed
input: this runs over free-form document text, so "not a command" is an
ordinary outcome.

Bodies are tokenized on whitespace. Each kind decides between its explicit
``key=value`` grammar and its positional shorthand:

- check, attack, save: explicit as soon as the body contains ``=``
- damage, heal: explicit only when the first token contains ``=``, so a
  shorthand body can still end in ``average=5`` or ``format=long``
- item: everything before ``activity=`` is the identifier

Brackets are matched up to the first ``]``, so a body containing ``]`` is
truncated there.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .models import (
    AttackOptions,
    BasicRollOptions,
    CheckOptions,
    CommandKind,
    DamageOptions,
    DamagePart,
    DiceDescription,
    HealOptions,
    ItemOptions,
    ParsedCommand,
    ReferenceOptions,
    SaveOptions,
)
from .vocabulary import (
    ReferenceCategory,
    is_ability,
    is_skill,
    normalize_ability,
    normalize_skill,
)

logger = logging.getLogger(__name__)

# Roll command words and the roll mode each one selects.
ROLL_ALIASES: dict[str, str | None] = {
    "roll": None,
    "publicroll": "public",
    "pr": "public",
    "gmroll": "gm",
    "gmr": "gm",
    "blindroll": "blind",
    "broll": "blind",
    "br": "blind",
    "selfroll": "self",
    "sr": "self",
}

_COMMAND_WORDS = "check|skill|tool|attack|damage|heal|item|save|concentration|" + "|".join(ROLL_ALIASES)

REFERENCE_PATTERN = re.compile(r"&Reference\[([^\]]*)\]")
IMMEDIATE_ROLL_PATTERN = re.compile(r"^\[\[([^/][^\]]*)\]\](?:\{([^}]+)\})?$")
COMMAND_PATTERN = re.compile(rf"\[\[/({_COMMAND_WORDS})(?![\w-])([^\]]*)\]\]")
DEFERRED_ROLL_PATTERN = re.compile(rf"^\[\[/({'|'.join(ROLL_ALIASES)})(?![\w-])([^\]]*)\]\](?:\{{([^}}]+)\}})?$")

_DICE_TERM = re.compile(r"d\d+")
_BARE_NUMBER = re.compile(r"^\d+$")
_STRICT_INT = re.compile(r"^[+-]?\d+$")
_SIGNED_NUMBER = re.compile(r"^([+-]?)(\d+)$")
_DICE_DESCRIPTION = re.compile(r"(\d+d\d+|\d+|\w+)(?:\[([^\]]+)\])?")
_ITEM_ID = re.compile(r"^[a-zA-Z0-9._-]+$")
_EXPLICIT_REFERENCE = re.compile(rf"^({'|'.join(c.value for c in ReferenceCategory)})=")

_CHECK_FORMATS = ("short", "long")
_ROLL_FORMATS = ("short", "long", "extended")
_RULES = ("2014", "2024")
_REFERENCE_CATEGORIES = frozenset(c.value for c in ReferenceCategory)


# --- Token helpers ---

def _int_or_str(value: str) -> int | str:
    """Parse a whole-token base-10 integer, otherwise keep the string."""
    if _STRICT_INT.match(value):
        return int(value)
    return value


def _split_pair(token: str) -> tuple[str, str]:
    key, _, value = token.partition("=")
    return key, value


def _one_or_many(values: list[str]) -> str | tuple[str, ...]:
    return values[0] if len(values) == 1 else tuple(values)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _tokenize_quoted(body: str) -> list[str]:
    """Split on spaces, keeping quoted runs (with their quotes) in one token.

    A quote only opens at the start of a token or right after ``=``, so
    apostrophes inside names (``Bigby's Hand``) are plain characters.
    """
    tokens: list[str] = []
    current = ""
    quote = ""
    for i, char in enumerate(body):
        if char in "\"'" and (i == 0 or body[i - 1] != "\\"):
            if quote:
                if char == quote:
                    quote = ""
            elif not current or current.endswith("="):
                quote = char
            current += char
        elif char.isspace() and not quote:
            if current.strip():
                tokens.append(current.strip())
            current = ""
        else:
            current += char
    if current.strip():
        tokens.append(current.strip())
    return tokens


def _average(value: str) -> bool | int | str:
    return True if value == "true" else _int_or_str(value)


# --- Per-kind body parsers ---

def _parse_check(body: str, kind: CommandKind) -> CheckOptions:
    if not body:
        return CheckOptions()

    fields: dict[str, Any] = {}
    if "=" in body:
        for token in body.split():
            key, value = _split_pair(token)
            if key == "ability":
                fields["ability"] = normalize_ability(value)
            elif key == "skill":
                if "/" in value:
                    fields["skill"] = tuple(normalize_skill(s) for s in value.split("/"))
                else:
                    fields["skill"] = normalize_skill(value)
            elif key == "tool":
                fields["tool"] = tuple(value.split("/")) if "/" in value else value
            elif key == "vehicle":
                fields["vehicle"] = value
            elif key == "dc":
                fields["dc"] = _int_or_str(value)
            elif key == "format" and value in _CHECK_FORMATS:
                fields["format"] = value
            elif key == "passive":
                fields["passive"] = value == "true"
            elif key == "activity":
                fields["activity"] = value
            elif key == "rules" and value in _RULES:
                fields["rules"] = value
        return CheckOptions(**fields)

    skills: list[str] = []
    for token in body.split():
        lower = token.lower()
        if is_ability(lower):
            fields["ability"] = normalize_ability(lower)
        elif is_skill(lower):
            skills.append(normalize_skill(lower))
        elif _STRICT_INT.match(token):
            fields["dc"] = int(token)
        elif kind is CommandKind.TOOL:
            fields["tool"] = token
        else:
            # House-rule skill
            skills.append(token)
    if skills:
        fields["skill"] = _one_or_many(skills)
    return CheckOptions(**fields)


def _parse_attack(body: str) -> AttackOptions:
    if not body:
        return AttackOptions()

    fields: dict[str, Any] = {}
    if "=" in body:
        for token in body.split():
            key, value = _split_pair(token)
            if key == "formula":
                fields["formula"] = _int_or_str(value.strip())
            elif key == "activity":
                fields["activity"] = value
            elif key == "attackMode":
                fields["attack_mode"] = value
            elif key == "format" and value in _ROLL_FORMATS:
                fields["format"] = value
            elif key == "rules" and value in _RULES:
                fields["rules"] = value
        return AttackOptions(**fields)

    tokens = body.split()
    if tokens[0] in _ROLL_FORMATS:
        return AttackOptions(format=tokens[0])

    match = _SIGNED_NUMBER.match(tokens[0])
    if match:
        number = int(match.group(2))
        fields["formula"] = -number if match.group(1) == "-" else number
    else:
        fields["formula"] = tokens[0]
    if len(tokens) > 1:
        fields["attack_mode"] = tokens[1]
    return AttackOptions(**fields)


def _shared_suffix(token: str, fields: dict[str, Any]) -> bool:
    """Consume an ``average``/``format=`` token shared by damage and heal."""
    if token == "average":
        fields["average"] = True
    elif token.startswith("average="):
        fields["average"] = _int_or_str(token[len("average="):])
    elif token.startswith("format="):
        value = token[len("format="):]
        if value in _ROLL_FORMATS:
            fields["format"] = value
    else:
        return False
    return True


def _parse_damage_rolls(body: str) -> DamageOptions:
    sections: list[list[str]] = []
    current: list[str] = []
    shared: list[str] = []
    tokens = body.split()
    for i, token in enumerate(tokens):
        if token == "average" or token.startswith(("average=", "format=")):
            shared = tokens[i:]
            break
        if token == "&":
            if current:
                sections.append(current)
                current = []
        else:
            current.append(token)
    if current:
        sections.append(current)

    rolls = [
        DamagePart(formula=section[0], type=_one_or_many(section[1:]) if len(section) > 1 else None)
        for section in sections
    ]
    fields: dict[str, Any] = {"rolls": tuple(rolls)}
    for token in shared:
        _shared_suffix(token, fields)
    return DamageOptions(**fields)


def _parse_damage(body: str) -> DamageOptions:
    if not body:
        return DamageOptions()
    if " & " in body:
        return _parse_damage_rolls(body)

    tokens = body.split()
    fields: dict[str, Any] = {}
    if "=" in tokens[0]:
        for token in tokens:
            key, value = _split_pair(token)
            if key == "formula":
                fields["formula"] = value
            elif key == "type":
                fields["type"] = tuple(value.split("/")) if "/" in value else value
            elif key == "average":
                fields["average"] = _average(value)
            elif key == "activity":
                fields["activity"] = value
            elif key == "format" and value in _ROLL_FORMATS:
                fields["format"] = value
        return DamageOptions(**fields)

    fields["formula"] = tokens[0]
    types: list[str] = []
    for token in tokens[1:]:
        if not _shared_suffix(token, fields) and "=" not in token:
            types.append(token)
    if types:
        fields["type"] = _one_or_many(types)
    return DamageOptions(**fields)


def _parse_heal(body: str) -> HealOptions:
    if not body:
        return HealOptions()

    tokens = body.split()
    fields: dict[str, Any] = {}
    if "=" in tokens[0]:
        for token in tokens:
            key, value = _split_pair(token)
            if key == "formula":
                fields["formula"] = value
            elif key == "type":
                if value in ("temp", "temphp"):
                    fields["type"] = "temp"
                elif value == "healing":
                    fields["type"] = "healing"
            elif key == "average":
                fields["average"] = _average(value)
            elif key == "activity":
                fields["activity"] = value
            elif key == "format" and value in _ROLL_FORMATS:
                fields["format"] = value
        return HealOptions(**fields)

    fields["formula"] = tokens[0]
    for token in tokens[1:]:
        if token in ("temp", "temphp"):
            fields["type"] = "temp"
        else:
            _shared_suffix(token, fields)
    return HealOptions(**fields)


def _classify_item(identifier: str) -> dict[str, str]:
    if "Actor." in identifier and "Item." in identifier:
        return {"uuid": identifier}
    if identifier.startswith("."):
        return {"relative_id": identifier}
    # A single word cannot be told apart from a relative id.
    if _ITEM_ID.match(identifier):
        return {"relative_id": identifier}
    return {"item_name": identifier}


def _parse_item(body: str) -> ItemOptions:
    if not body:
        return ItemOptions()
    if "=" not in body:
        return ItemOptions(**_classify_item(body))

    fields: dict[str, Any] = {}
    identifier: list[str] = []
    for token in _tokenize_quoted(body):
        if token.startswith("activity="):
            fields["activity"] = _unquote(token[len("activity="):])
        elif "activity" not in fields:
            identifier.append(token)
    if identifier:
        fields.update(_classify_item(" ".join(identifier)))
    return ItemOptions(**fields)


def _parse_save(body: str) -> SaveOptions:
    if not body:
        return SaveOptions()

    fields: dict[str, Any] = {}
    if "=" in body:
        for token in body.split():
            key, value = _split_pair(token)
            if key == "ability":
                if "/" in value:
                    fields["ability"] = tuple(normalize_ability(a) for a in value.split("/"))
                else:
                    fields["ability"] = normalize_ability(value)
            elif key == "dc":
                fields["dc"] = _int_or_str(value)
            elif key == "format" and value in _CHECK_FORMATS:
                fields["format"] = value
            elif key == "activity":
                fields["activity"] = value
        return SaveOptions(**fields)

    abilities: list[str] = []
    for token in body.split():
        lower = token.lower()
        if is_ability(lower):
            abilities.append(normalize_ability(lower))
        elif _STRICT_INT.match(token):
            fields["dc"] = int(token)
        else:
            # House-rule ability
            abilities.append(token)
    if abilities:
        fields["ability"] = _one_or_many(abilities)
    return SaveOptions(**fields)


def _parse_basic_roll(body: str, **base: Any) -> BasicRollOptions:
    fields: dict[str, Any] = {key: value for key, value in base.items() if value is not None}
    if not body:
        return BasicRollOptions(**fields)

    formula, hash_sign, description = body.partition("#")
    if hash_sign:
        formula = formula.strip()
        description = description.strip()
        if description:
            fields["description"] = description

    if "[" in formula:
        described = [
            DiceDescription(formula=m.group(1), description=m.group(2))
            for m in _DICE_DESCRIPTION.finditer(formula)
            if m.group(2)
        ]
        if described:
            fields["dice_descriptions"] = tuple(described)
    fields["formula"] = formula
    return BasicRollOptions(**fields)


def _parse_reference(body: str) -> ReferenceOptions:
    if not body:
        return ReferenceOptions()

    fields: dict[str, Any] = {}
    tokens = _tokenize_quoted(body)

    if _EXPLICIT_REFERENCE.match(body.strip()):
        for token in tokens:
            if token.startswith("apply="):
                if token == "apply=false":
                    fields["apply"] = False
                continue
            key, value = _split_pair(token)
            if key in _REFERENCE_CATEGORIES:
                fields["category"] = key
                fields["rule"] = _unquote(value) or None
        return ReferenceOptions(**fields)

    words: list[str] = []
    for token in tokens:
        if token.startswith("apply="):
            if token == "apply=false":
                fields["apply"] = False
        else:
            words.append(_unquote(token))
    if words:
        fields["rule"] = " ".join(words)
    return ReferenceOptions(**fields)


# --- Entry point ---

def parse_command(text: str) -> ParsedCommand | None:
    """Recognize a roll command or rule reference in ``text``.

    Recognition order is: ``&Reference[...]`` anywhere in the text, then a
    whole-text immediate inline roll ``[[formula]]{label}``, then the first
    ``[[/kind ...]]`` command.

    Args:
        text: Text holding the command, e.g. ``"[[/check dex 15]]"``.

    Returns:
        The parsed command with ``original_text`` set to ``text``, or None
        when no command is recognized.

    Example:
        >>> parse_command("[[/check dex 15]]").options
        CheckOptions(ability='dexterity', skill=None, tool=None, vehicle=None, dc=15, format=None, passive=None, activity=None, rules=None)
        >>> parse_command("[[/spell fireball]]") is None
        True
    """
    match = REFERENCE_PATTERN.search(text)
    if match:
        return ParsedCommand(
            kind=CommandKind.REFERENCE,
            options=_parse_reference(match.group(1)),
            original_text=text,
        )

    match = IMMEDIATE_ROLL_PATTERN.match(text)
    if match:
        formula = match.group(1)
        if _DICE_TERM.search(formula) or _BARE_NUMBER.match(formula.strip()):
            return ParsedCommand(
                kind=CommandKind.ROLL,
                options=_parse_basic_roll(formula.strip(), inline="immediate", label=match.group(2)),
                original_text=text,
            )

    match = COMMAND_PATTERN.search(text)
    if not match:
        logger.debug(f"No command recognized in {text!r}")
        return None

    word, body = match.group(1), match.group(2).strip()

    if word in ROLL_ALIASES:
        mode = ROLL_ALIASES[word]
        deferred = DEFERRED_ROLL_PATTERN.match(text)
        if deferred and deferred.group(3):
            options = _parse_basic_roll(
                deferred.group(2).strip(), mode=mode, inline="deferred", label=deferred.group(3)
            )
        else:
            options = _parse_basic_roll(body, mode=mode)
        return ParsedCommand(kind=CommandKind.ROLL, options=options, original_text=text)

    kind = CommandKind(word)
    if kind is CommandKind.ATTACK:
        options = _parse_attack(body)
    elif kind is CommandKind.DAMAGE:
        options = _parse_damage(body)
    elif kind is CommandKind.HEAL:
        options = _parse_heal(body)
    elif kind is CommandKind.ITEM:
        options = _parse_item(body)
    elif kind in (CommandKind.SAVE, CommandKind.CONCENTRATION):
        options = _parse_save(body)
    else:
        options = _parse_check(body, kind)
    return ParsedCommand(kind=kind, options=options, original_text=text)
