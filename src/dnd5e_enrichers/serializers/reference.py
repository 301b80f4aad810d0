"""Serializer for ``&Reference[...]`` rule links."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import ReferenceOptions
from ..vocabulary import is_condition, normalize_reference
from ._common import coerce_options, quote_if_needed


def serialize_reference(options: ReferenceOptions | Mapping[str, Any] | str | None = None) -> str:
    """Serialize reference options to an ``&Reference[...]`` link.

    With a category the name is normalized within that category only and
    kept as given when it is not found there. Without one, the category is
    inferred from the vocabulary tables and unknown names are treated as
    generic rules. ``apply=false`` is only emitted for conditions.

    Example:
        >>> serialize_reference({"rule": "PRONE", "apply": False})
        '&Reference[prone apply=false]'
        >>> serialize_reference({"category": "skill", "rule": "ani"})
        '&Reference[skill=animalHandling]'
        >>> serialize_reference({"rule": "Difficult Terrain"})
        '&Reference["Difficult Terrain"]'
    """
    if isinstance(options, str):
        return f"&Reference[{options}]"

    opts = coerce_options(ReferenceOptions, options)
    if not opts.rule and not opts.category:
        return "&Reference[]"

    parts: list[str] = []
    if opts.category and opts.rule:
        name = normalize_reference(opts.rule, opts.category) or opts.rule
        parts.append(f"{opts.category}={quote_if_needed(name)}")
    elif opts.rule:
        name = normalize_reference(opts.rule) or opts.rule
        parts.append(quote_if_needed(name))
    else:
        parts.append(f"{opts.category}=")

    if opts.apply is False:
        condition = opts.category == "condition" or (
            not opts.category and bool(opts.rule) and is_condition(opts.rule)
        )
        if condition:
            parts.append("apply=false")

    return f"&Reference[{' '.join(parts)}]"
