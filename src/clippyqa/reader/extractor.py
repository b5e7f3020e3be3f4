# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Flatten Clippy diagnostics into :class:`Issue` records."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Final

from ..config import ReaderConfig
from ..core.models import Issue, JsonValue
from ..core.serialization import (
    as_array,
    as_object,
    coerce_optional_str,
    first_object,
    get_array,
    get_number,
    get_object,
    get_text,
)

LOGGER = logging.getLogger(__name__)

MESSAGE_KEY: Final[str] = "message"
CODE_KEY: Final[str] = "code"
SPANS_KEY: Final[str] = "spans"
CHILDREN_KEY: Final[str] = "children"
LEVEL_KEY: Final[str] = "level"
FILE_NAME_KEY: Final[str] = "file_name"
SUGGESTED_REPLACEMENT_KEY: Final[str] = "suggested_replacement"
LINE_START_KEY: Final[str] = "line_start"
LINE_END_KEY: Final[str] = "line_end"
COLUMN_START_KEY: Final[str] = "column_start"
COLUMN_END_KEY: Final[str] = "column_end"
DEFAULT_CONFIG: Final[ReaderConfig] = ReaderConfig()


def suggested_replacement(child: Mapping[str, JsonValue]) -> str | None:
    """Return the replacement proposed by the first span of ``child``."""

    return get_text(first_object(get_array(child, SPANS_KEY)), SUGGESTED_REPLACEMENT_KEY)


def _child_contributions(child: Mapping[str, JsonValue], config: ReaderConfig) -> list[str]:
    """Return the message lines a single child adds to the composed message."""

    level = get_text(child, LEVEL_KEY)
    text = get_text(child, MESSAGE_KEY)
    if config.is_noise_level(level) or config.is_noise_message(text):
        return []
    parts = [text] if text is not None else []
    replacement = suggested_replacement(child)
    if replacement is not None:
        parts.append(replacement)
    return parts


def compose_message(
    primary: str,
    children: Sequence[JsonValue],
    *,
    config: ReaderConfig | None = None,
) -> str:
    """Append child explanations and suggested fixes to ``primary``.

    Children are visited in order. Notes and "for further information visit"
    links are dropped; every other child contributes its message followed by
    the suggested replacement of its first span, each on its own line.

    Args:
        primary: Top-level diagnostic message.
        children: Raw ``children`` array of the diagnostic.
        config: Optional reader configuration overriding the noise filters.

    Returns:
        str: ``primary`` followed by the newline-separated contributions.
    """

    active = config or DEFAULT_CONFIG
    parts = [
        part
        for child in (as_object(entry) for entry in children)
        if child is not None
        for part in _child_contributions(child, active)
    ]
    return primary + "".join(f"\n{part}" for part in parts)


def extract_issue(node: JsonValue, *, config: ReaderConfig | None = None) -> Issue | None:
    """Build an :class:`Issue` from one raw diagnostic.

    Args:
        node: Parsed JSON object for a single report line.
        config: Optional reader configuration.

    Returns:
        Issue | None: The flattened issue, or ``None`` when the diagnostic has
        no code, no usable primary span, or no ``message`` object at all.
    """

    message = get_object(node, MESSAGE_KEY)
    if message is None:
        LOGGER.debug("skipping diagnostic without a message object")
        return None
    code = get_object(message, CODE_KEY)
    if code is None:
        LOGGER.debug("skipping diagnostic without a code")
        return None
    rule_key = coerce_optional_str(code.get(CODE_KEY))
    if rule_key is None:
        LOGGER.debug("skipping diagnostic whose code has no identifier")
        return None
    span = first_object(get_array(message, SPANS_KEY))
    if span is None:
        LOGGER.debug("skipping %s: no primary span", rule_key)
        return None

    text = get_text(message, MESSAGE_KEY)
    children = get_array(message, CHILDREN_KEY)
    if text is not None and children:
        text = compose_message(text, children, config=config)

    issue = Issue(
        file_path=get_text(span, FILE_NAME_KEY),
        rule_key=rule_key,
        message=text,
        line_start=get_number(span, LINE_START_KEY),
        line_end=get_number(span, LINE_END_KEY),
        col_start=get_number(span, COLUMN_START_KEY),
        col_end=get_number(span, COLUMN_END_KEY),
        severity=get_text(message, LEVEL_KEY),
    )
    if not issue.has_location():
        LOGGER.debug("skipping %s: primary span has no position", rule_key)
        return None
    return issue


def iter_issues(results: JsonValue, *, config: ReaderConfig | None = None) -> Iterator[Issue]:
    """Yield one issue per reportable element of ``results``, in array order."""

    for node in as_array(results) or ():
        issue = extract_issue(node, config=config)
        if issue is not None:
            yield issue


__all__ = ["compose_message", "extract_issue", "iter_issues", "suggested_replacement"]
