"""
D&D 5e Enrichers MCP Server
Serializes, parses and finds dnd5e roll commands and rule references, built with FastMCP.
"""

import logging
from typing import Annotated, Any, Literal

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .config import load_settings
from .tools import (
    enhance_rules_text as _enhance_rules_text,
    find_document_commands as _find_document_commands,
    normalize_term as _normalize_term,
    parse_command_text as _parse_command_text,
    serialize_command as _serialize_command,
)

logger = logging.getLogger("dnd5e-enrichers")

if not load_dotenv():
    logger.debug("No .env file found, using process environment only")

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    )

mcp = FastMCP(
    name=settings.server_name
)

logger.debug("✅ Server initialized, registering tools")


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def serialize_command(
    kind: Annotated[Literal[
        "check", "skill", "tool", "attack", "damage", "heal",
        "item", "save", "concentration", "roll", "reference",
    ], Field(description="Command kind to produce")],
    options: Annotated[dict[str, Any] | None, Field(description="""
        Command options, e.g. {"ability": "dex", "dc": 15} for a check or
        {"formula": "2d6", "type": "fire"} for damage. Omit for the bare form.
        """)] = None,
) -> str:
    """Build a roll command or rule reference from structured options."""
    return _serialize_command(kind, options)


@mcp.tool
def parse_command(
    text: Annotated[str, Field(description="Command text, e.g. [[/check dex 15]] or &Reference[prone]")],
    output_format: Annotated[Literal["json", "yaml"] | None, Field(description="Output format")] = None,
) -> str:
    """Parse a roll command or rule reference back into structured options."""
    return _parse_command_text(text, output_format or settings.output_format)


@mcp.tool
def find_commands(
    text: Annotated[str, Field(description="Document text or HTML to scan")],
    output_format: Annotated[Literal["json", "yaml"] | None, Field(description="Output format")] = None,
) -> str:
    """List every roll command and rule reference found in a document."""
    return _find_document_commands(text, output_format or settings.output_format)


@mcp.tool
def enhance_rules_text(
    text: Annotated[str, Field(description="Rules prose, e.g. 'a DC 13 Dexterity saving throw'")],
) -> str:
    """Rewrite DC checks, saving throws and passive checks in prose as roll commands."""
    return _enhance_rules_text(text)


@mcp.tool
def normalize_term(
    category: Annotated[str, Field(description="ability, skill, reference, or reference:<category> such as reference:condition")],
    value: Annotated[str, Field(description="Name or abbreviation to normalize")],
) -> str:
    """Normalize an ability, skill or rule reference name to its canonical form."""
    return _normalize_term(category, value)


def main() -> None:
    """Main entry point for the D&D 5e Enrichers MCP Server."""
    mcp.run()

if __name__ == "__main__":
    main()
