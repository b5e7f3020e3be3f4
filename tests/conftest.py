# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

NEEDLESS_RETURN_LINE = (
    '{"message":{"code":{"code":"clippy::needless_return"},"message":"unneeded return","level":"warning",'
    '"spans":[{"file_name":"src/lib.rs","line_start":10,"line_end":10,"column_start":5,"column_end":17}],'
    '"children":[]}}'
)


@pytest.fixture
def needless_return_line() -> str:
    """Return the canonical single-line Clippy diagnostic used across tests."""
    return NEEDLESS_RETURN_LINE


@pytest.fixture
def make_diagnostic() -> Callable[..., dict[str, object]]:
    """Return a factory building raw Clippy diagnostics with sensible defaults."""

    def _make(
        *,
        code: str | None = "clippy::needless_return",
        message: str | None = "unneeded return",
        level: str = "warning",
        file_name: str = "src/lib.rs",
        children: list[object] | None = None,
        spans: list[object] | None = None,
    ) -> dict[str, object]:
        body: dict[str, object] = {
            "message": message,
            "level": level,
            "spans": (
                spans
                if spans is not None
                else [
                    {
                        "file_name": file_name,
                        "line_start": 10,
                        "line_end": 10,
                        "column_start": 5,
                        "column_end": 17,
                    },
                ]
            ),
            "children": children if children is not None else [],
        }
        if code is not None:
            body["code"] = {"code": code}
        return {"message": body}

    return _make


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes report lines to a temporary file."""

    def _write(*lines: str | dict[str, object], name: str = "clippy.log") -> Path:
        path = tmp_path / name
        rendered = [line if isinstance(line, str) else json.dumps(line) for line in lines]
        path.write_text("\n".join(rendered) + "\n", encoding="utf-8")
        return path

    return _write
