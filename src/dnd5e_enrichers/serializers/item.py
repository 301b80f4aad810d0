"""Serializer for ``[[/item ...]]`` use enrichers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import ItemOptions
from ._common import coerce_options, quote_if_needed, wrap


def serialize_item(options: ItemOptions | Mapping[str, Any] | str | None = None) -> str:
    """Serialize item options to an ``[[/item]]`` command.

    The identifier is the first of ``uuid``, ``relative_id`` and
    ``item_name`` that is set; the others are ignored. An activity name with
    spaces or ``=`` is wrapped in double quotes.

    Example:
        >>> serialize_item({"item_name": "Tentacles", "activity": "Escape Tentacles"})
        '[[/item Tentacles activity="Escape Tentacles"]]'
        >>> serialize_item({"uuid": "Actor.A.Item.B", "item_name": "Bite"})
        '[[/item Actor.A.Item.B]]'
    """
    if isinstance(options, str):
        return wrap("item", [options] if options else [])

    opts = coerce_options(ItemOptions, options)
    identifier = opts.uuid or opts.relative_id or opts.item_name
    if not identifier:
        return wrap("item", [])

    parts = [identifier]
    if opts.activity:
        parts.append(f"activity={quote_if_needed(opts.activity)}")
    return wrap("item", parts)
