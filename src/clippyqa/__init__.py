# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert Cargo Clippy JSON-lines reports into normalised issues."""

from __future__ import annotations

from importlib import metadata

from .config import ReaderConfig, load_config
from .core.errors import ClippyReportError, ReportNotFoundError, ReportParseError, ReportReadError
from .core.models import Issue
from .reader import iter_issues, load_issues, read, read_report, to_json

__all__ = [
    "ClippyReportError",
    "Issue",
    "ReaderConfig",
    "ReportNotFoundError",
    "ReportParseError",
    "ReportReadError",
    "__version__",
    "iter_issues",
    "load_config",
    "load_issues",
    "read",
    "read_report",
    "to_json",
]

try:
    __version__ = metadata.version("clippyqa")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
