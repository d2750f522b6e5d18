"""Filter to query-string encoding."""

from __future__ import annotations

from dataclasses import fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from netorca_sdk.types import ChangeInstanceFilter, ServiceItemFilter

# Consumed to build the URL path, never sent as a parameter.
_PATH_FIELDS = frozenset({"pov"})


def encode_filters(filters: ServiceItemFilter | ChangeInstanceFilter) -> str:
    """Encode a filter into a URL query string.

    Only set, non-zero fields are included: booleans when true, integers when
    greater than zero, non-empty strings and present timestamps. Keys are
    sorted so the same filter always yields the same string.
    """
    params: dict[str, str] = {}
    for f in fields(filters):
        if f.name in _PATH_FIELDS:
            continue
        value = _format_value(getattr(filters, f.name))
        if value is not None:
            params[f.name] = value
    return urlencode(sorted(params.items()))


def _format_value(value: Any) -> str | None:
    if value is None:
        return None
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else None
    if isinstance(value, int):
        return str(value) if value > 0 else None
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Enum):
        value = value.value
    value = str(value)
    return value or None


def format_timestamp(value: datetime) -> str:
    """Render a datetime as RFC 3339 in UTC with whole seconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.astimezone(timezone.utc)
        .replace(microsecond=0)
        .isoformat()
        .replace("+00:00", "Z")
    )
