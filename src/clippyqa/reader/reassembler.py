# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Join Clippy's one-object-per-line output into a single JSON document."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from ..config import DEFAULT_ENCODING
from ..core.errors import ReportNotFoundError, ReportReadError

LOGGER = logging.getLogger(__name__)

RESULTS_KEY: Final[str] = "results"
JSON_PREFIX: Final[str] = '{"' + RESULTS_KEY + '": ['
JSON_SUFFIX: Final[str] = "]}"
LINE_SEPARATOR: Final[str] = ","


def is_json_line(line: str) -> bool:
    """Return whether ``line`` looks like a complete JSON object.

    Only the boundary characters of the trimmed line are inspected; the
    content is not validated here.
    """

    trimmed = line.strip()
    return trimmed.startswith("{") and trimmed.endswith("}")


def reassemble(lines: Iterable[str]) -> str:
    """Wrap the JSON-looking entries of ``lines`` in a ``results`` envelope.

    Args:
        lines: Raw report lines in source order. Blank lines, prose and
            partial fragments are dropped silently.

    Returns:
        str: ``{"results": [...]}`` containing every kept line, or an empty
        results array when nothing qualified.
    """

    kept = [line.strip() for line in lines if is_json_line(line)]
    LOGGER.debug("reassembled %d JSON line(s)", len(kept))
    return JSON_PREFIX + LINE_SEPARATOR.join(kept) + JSON_SUFFIX


def to_json(report: Path | None, *, encoding: str = DEFAULT_ENCODING) -> io.BytesIO:
    """Read ``report`` and return its reassembled JSON document as bytes.

    The file is fully consumed and closed before this function returns.

    Args:
        report: Path of the Clippy text report.
        encoding: Text encoding used to decode the report.

    Returns:
        io.BytesIO: UTF-8 encoded document positioned at the start.

    Raises:
        ReportNotFoundError: If ``report`` is ``None`` or does not exist.
        ReportReadError: If reading or decoding fails part way through.
    """

    if report is None:
        raise ReportNotFoundError("No Clippy report was supplied")
    try:
        with report.open(encoding=encoding) as handle:
            document = reassemble(handle)
    except FileNotFoundError as exc:
        raise ReportNotFoundError(f"Clippy report not found: {report}") from exc
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise ReportReadError(f"Unable to read Clippy report {report}: {exc}") from exc
    return io.BytesIO(document.encode("utf-8"))


__all__ = ["JSON_PREFIX", "JSON_SUFFIX", "RESULTS_KEY", "is_json_line", "reassemble", "to_json"]
