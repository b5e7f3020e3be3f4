# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Clippy report reassembly and diagnostic extraction."""

from __future__ import annotations

from .extractor import compose_message, extract_issue, iter_issues
from .reassembler import is_json_line, reassemble, to_json
from .report import IssueSink, load_issues, read, read_report

__all__ = [
    "IssueSink",
    "compose_message",
    "extract_issue",
    "is_json_line",
    "iter_issues",
    "load_issues",
    "read",
    "read_report",
    "reassemble",
    "to_json",
]
