"""Helpers shared by the command serializers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from ..models import EnricherModel

ModelT = TypeVar("ModelT", bound=EnricherModel)


def coerce_options(model: type[ModelT], options: ModelT | Mapping[str, Any] | None) -> ModelT:
    """Turn ``None``, a mapping or a model instance into a model instance.

    Raises:
        pydantic.ValidationError: If a mapping does not fit the model.
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    return model.model_validate(options)


def wrap(keyword: str, parts: Sequence[str]) -> str:
    """Render ``[[/keyword part part ...]]``, or ``[[/keyword]]`` without parts."""
    if not parts:
        return f"[[/{keyword}]]"
    return f"[[/{keyword} {' '.join(parts)}]]"


def is_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_multiple(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) > 1


def slash_join(value: str | Sequence[str]) -> str:
    if isinstance(value, str):
        return value
    return "/".join(value)


def render_value(value: Any) -> str:
    """Render a scalar for ``key=value`` output, with lowercase booleans."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def quote_if_needed(value: str) -> str:
    """Wrap a value in double quotes when it contains a space or ``=``.

    Embedded quotes are not escaped.
    """
    if " " in value or "=" in value:
        return f'"{value}"'
    return value
