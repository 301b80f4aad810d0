"""
Server configuration from environment variables.

Values are read with ``os.getenv`` after the entry point has loaded any
``.env`` file. A bad value never stops the server: it is logged and the
default is used instead.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("json", "yaml")


class EnricherSettings(BaseModel):
    """Settings for the enricher tool server."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level for the server process"
    )
    server_name: str = Field(
        default="dnd5e-enrichers",
        min_length=1,
        description="Name the MCP server announces to clients"
    )
    output_format: Literal["json", "yaml"] = Field(
        default="json",
        description="Default rendering for structured tool output"
    )


def _choice(variable: str, allowed: tuple[str, ...], default: str, normalize=str.lower) -> str:
    raw = os.getenv(variable)
    if raw is None or not raw.strip():
        return default
    value = normalize(raw.strip())
    if value not in allowed:
        logger.warning(f"Invalid {variable}={raw!r}, expected one of {', '.join(allowed)}; using '{default}'")
        return default
    return value


def load_settings() -> EnricherSettings:
    """Build settings from ``ENRICHERS_*`` environment variables."""
    server_name = (os.getenv("ENRICHERS_SERVER_NAME") or "").strip() or "dnd5e-enrichers"
    settings = EnricherSettings(
        log_level=_choice("ENRICHERS_LOG_LEVEL", LOG_LEVELS, "INFO", normalize=str.upper),
        server_name=server_name,
        output_format=_choice("ENRICHERS_OUTPUT_FORMAT", OUTPUT_FORMATS, "json"),
    )
    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings
