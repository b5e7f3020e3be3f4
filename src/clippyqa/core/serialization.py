# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Total accessors over parsed JSON trees plus issue serialisation helpers."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Final, Literal, cast

from typing_extensions import TypeAliasType

from .models import Issue, JsonValue

RenderFormat = TypeAliasType("RenderFormat", Literal["json", "jsonl"])

JSON_INDENT: Final[int] = 2


def as_object(value: JsonValue | None) -> Mapping[str, JsonValue] | None:
    """Return ``value`` when it is a JSON object, otherwise ``None``."""

    if isinstance(value, Mapping):
        return cast(Mapping[str, JsonValue], value)
    return None


def as_array(value: JsonValue | None) -> Sequence[JsonValue] | None:
    """Return ``value`` when it is a JSON array, otherwise ``None``."""

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return cast(Sequence[JsonValue], value)
    return None


def get_object(node: JsonValue | None, key: str) -> Mapping[str, JsonValue] | None:
    """Return the object stored under ``key`` in ``node``.

    Args:
        node: Parsed JSON value that is expected to be an object.
        key: Field name to look up.

    Returns:
        Mapping[str, JsonValue] | None: Nested object, or ``None`` when ``node``
        is not an object, the field is missing, or the field is not an object.
    """

    mapping = as_object(node)
    if mapping is None:
        return None
    return as_object(mapping.get(key))


def get_array(node: JsonValue | None, key: str) -> Sequence[JsonValue] | None:
    """Return the array stored under ``key`` in ``node`` or ``None``."""

    mapping = as_object(node)
    if mapping is None:
        return None
    return as_array(mapping.get(key))


def get_text(node: JsonValue | None, key: str) -> str | None:
    """Return the string stored under ``key`` in ``node`` or ``None``."""

    mapping = as_object(node)
    if mapping is None:
        return None
    value = mapping.get(key)
    return value if isinstance(value, str) else None


def get_number(node: JsonValue | None, key: str) -> int | None:
    """Return the numeric field ``key`` of ``node`` as an integer."""

    mapping = as_object(node)
    if mapping is None:
        return None
    return coerce_optional_int(mapping.get(key))


def first_object(values: Sequence[JsonValue] | None) -> Mapping[str, JsonValue] | None:
    """Return the first element of ``values`` when it is a JSON object."""

    if not values:
        return None
    return as_object(values[0])


def coerce_optional_int(value: JsonValue | None) -> int | None:
    """Return ``value`` truncated to ``int`` when it is a JSON number.

    Booleans are not treated as numbers and strings are never parsed; both
    yield ``None`` so that a malformed position never turns into ``0``.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return None
    return None


def coerce_optional_str(value: JsonValue | None) -> str | None:
    """Return a textual representation of scalar ``value`` or ``None``."""

    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def serialize_issue(issue: Issue) -> dict[str, JsonValue]:
    """Convert an issue into a JSON-friendly mapping keyed by camelCase names."""

    return cast(dict[str, JsonValue], issue.model_dump(mode="json", by_alias=True))


def render_issues(issues: Iterable[Issue], fmt: RenderFormat = "json") -> str:
    """Render ``issues`` as a JSON array or as JSON lines.

    Args:
        issues: Issues to render, consumed in order.
        fmt: ``"json"`` for an indented array, ``"jsonl"`` for one object per line.

    Returns:
        str: Rendered document without a trailing newline.
    """

    payload = [serialize_issue(issue) for issue in issues]
    if fmt == "jsonl":
        return "\n".join(json.dumps(entry, ensure_ascii=False) for entry in payload)
    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


__all__ = [
    "RenderFormat",
    "as_array",
    "as_object",
    "coerce_optional_int",
    "coerce_optional_str",
    "first_object",
    "get_array",
    "get_number",
    "get_object",
    "get_text",
    "render_issues",
    "serialize_issue",
]
