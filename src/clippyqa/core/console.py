# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console factory shared by the CLI and the console helpers."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _build_console(color: bool, emoji: bool, tty: bool) -> Console:
    colored = color and tty
    return Console(
        color_system="auto" if colored else None,
        force_terminal=tty,
        no_color=not colored,
        emoji=emoji,
        soft_wrap=True,
    )


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the console matching ``color``, ``emoji`` and the current TTY state.

    Consoles are cached per combination, so the report tables and the
    status lines of one run share a single instance.
    """

    return _build_console(color, emoji, detect_tty())


__all__ = ["detect_tty", "get_console"]
