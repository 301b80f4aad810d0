"""
Tool functions behind the MCP server.

Each function takes plain arguments and returns a string, reporting failures
as ``Error: ...`` messages rather than raising, so the server can expose them
directly.
"""

import json
import logging
from typing import Any, Literal

import yaml
from pydantic import ValidationError

from .models import ParsedCommand
from .parser import parse_command
from .scanner import enhance_text, find_commands
from .serializers import UnknownCommandKindError, serialize
from .vocabulary import ReferenceCategory, normalize_ability, normalize_reference, normalize_skill

logger = logging.getLogger("dnd5e-enrichers")

OutputFormat = Literal["json", "yaml"]


def _render(data: Any, output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip("\n")
    if output_format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    raise ValueError(f"Unknown output format '{output_format}', expected 'json' or 'yaml'")


def serialize_command(kind: str, options: dict[str, Any] | str | int | None = None) -> str:
    """Render a command of ``kind`` from an options mapping."""
    try:
        return serialize(kind, options)
    except UnknownCommandKindError as e:
        return f"Error: {e}"
    except ValidationError as e:
        logger.info(f"Rejected {kind} options: {e.error_count()} validation error(s)")
        return f"Error: invalid options for '{kind}': {e}"


def parse_command_text(text: str, output_format: OutputFormat = "json") -> str:
    """Parse one command and render the result as JSON or YAML."""
    parsed = parse_command(text)
    if parsed is None:
        return "No command recognized in the given text."
    try:
        return _render(parsed.to_dict(), output_format)
    except ValueError as e:
        return f"Error: {e}"


def find_document_commands(text: str, output_format: OutputFormat = "json") -> str:
    """Find every command in a document and render them as a JSON or YAML list."""
    commands: list[ParsedCommand] = find_commands(text)
    try:
        return _render([command.to_dict() for command in commands], output_format)
    except ValueError as e:
        return f"Error: {e}"


def enhance_rules_text(text: str) -> str:
    """Turn DC checks, saving throws and passive checks in prose into commands."""
    return enhance_text(text)


def normalize_term(category: str, value: str) -> str:
    """Normalize a vocabulary term.

    ``category`` is ``ability`` or ``skill`` for roll commands, ``reference``
    to infer a reference category, or ``reference:<category>`` (for example
    ``reference:condition``) to look in one reference table only.
    """
    if category == "ability":
        return normalize_ability(value)
    if category == "skill":
        return normalize_skill(value)
    if category == "reference":
        return normalize_reference(value)
    if category.startswith("reference:"):
        name = category.partition(":")[2]
        try:
            reference_category = ReferenceCategory(name)
        except ValueError:
            return f"Error: unknown reference category '{name}'"
        normalized = normalize_reference(value, reference_category)
        if normalized is None:
            return f"Error: '{value}' is not a known {reference_category.value} reference"
        return normalized
    return f"Error: unknown category '{category}', expected ability, skill, reference or reference:<category>"
