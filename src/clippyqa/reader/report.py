# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read a Clippy report end to end and deliver issues to a sink."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import IO, cast

from typing_extensions import TypeAliasType

from ..config import ReaderConfig
from ..core.errors import ReportParseError
from ..core.models import Issue, JsonValue
from ..core.serialization import as_object
from .extractor import iter_issues
from .reassembler import RESULTS_KEY, to_json

LOGGER = logging.getLogger(__name__)

IssueSink = TypeAliasType("IssueSink", Callable[[Issue], None])


def _parse(stream: IO[bytes] | IO[str]) -> JsonValue:
    try:
        return cast(JsonValue, json.load(stream))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ReportParseError(f"Clippy report is not valid JSON: {exc}") from exc


def read(
    stream: IO[bytes] | IO[str],
    sink: IssueSink,
    *,
    config: ReaderConfig | None = None,
) -> int:
    """Parse a reassembled report and push each issue to ``sink``.

    The whole document is parsed before the first issue is emitted, so a
    parse failure never leaves the sink with a partial sequence.

    Args:
        stream: JSON document shaped as ``{"results": [...]}``.
        sink: Callback invoked once per issue, in source order.
        config: Optional reader configuration.

    Returns:
        int: Number of issues delivered to ``sink``.

    Raises:
        ReportParseError: If the document is not valid JSON or is not an object.
    """

    root = as_object(_parse(stream))
    if root is None:
        raise ReportParseError("Clippy report root must be a JSON object")
    emitted = 0
    for issue in iter_issues(root.get(RESULTS_KEY), config=config):
        sink(issue)
        emitted += 1
    LOGGER.debug("emitted %d issue(s)", emitted)
    return emitted


def read_report(
    report: Path | None,
    sink: IssueSink,
    *,
    config: ReaderConfig | None = None,
) -> int:
    """Reassemble ``report`` and push its issues to ``sink``."""

    active = config or ReaderConfig()
    return read(to_json(report, encoding=active.encoding), sink, config=active)


def load_issues(report: Path | None, *, config: ReaderConfig | None = None) -> list[Issue]:
    """Return every issue contained in ``report``."""

    issues: list[Issue] = []
    read_report(report, issues.append, config=config)
    return issues


__all__ = ["IssueSink", "load_issues", "read", "read_report"]
