# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while loading Clippy reports."""

from __future__ import annotations


class ClippyReportError(Exception):
    """Base class for every error surfaced by clippyqa."""


class ReportNotFoundError(ClippyReportError, FileNotFoundError):
    """Raised when the report handle is absent or the file does not exist."""


class ReportReadError(ClippyReportError, OSError):
    """Raised when the report cannot be read to completion."""


class ReportParseError(ClippyReportError, ValueError):
    """Raised when the reassembled report is not a valid JSON document."""


class ConfigError(ClippyReportError):
    """Raised when configuration input is invalid."""


__all__ = [
    "ClippyReportError",
    "ConfigError",
    "ReportNotFoundError",
    "ReportParseError",
    "ReportReadError",
]
