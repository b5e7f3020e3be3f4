# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application converting Clippy reports into normalised issues."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Final

import typer
from rich.table import Table
from rich.text import Text

from ..config import ReaderConfig, load_config
from ..core.console import detect_tty, get_console
from ..core.errors import ClippyReportError
from ..core.logging import enable_debug_logging, fail, info, ok, section, warn
from ..core.models import Issue
from ..core.serialization import render_issues
from ..reader import load_issues

ERROR_EXIT_CODE: Final[int] = 2
UNKNOWN_LABEL: Final[str] = "-"


class OutputFormat(StrEnum):
    """Rendering styles supported by ``convert``."""

    JSON = "json"
    JSONL = "jsonl"
    TABLE = "table"


app = typer.Typer(
    name="clippyqa",
    help="Normalise Cargo Clippy JSON-lines reports.",
    no_args_is_help=True,
)


def _load(report: Path, config_path: Path | None, *, use_emoji: bool, use_color: bool) -> list[Issue]:
    """Load ``report`` or exit with :data:`ERROR_EXIT_CODE` on failure."""

    try:
        config: ReaderConfig = load_config(config_path, root=Path.cwd())
        return load_issues(report, config=config)
    except ClippyReportError as exc:
        fail(str(exc), use_emoji=use_emoji, use_color=use_color)
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc


def _position(start: int | None, end: int | None) -> str:
    if start is None:
        return UNKNOWN_LABEL
    if end is None or end == start:
        return str(start)
    return f"{start}-{end}"


def _issue_table(issues: Sequence[Issue]) -> Table:
    table = Table(show_lines=False)
    table.add_column("File", overflow="fold")
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Col", justify="right", no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Rule", no_wrap=True)
    table.add_column("Message", overflow="fold")
    for issue in issues:
        table.add_row(
            Text(issue.file_path or UNKNOWN_LABEL),
            _position(issue.line_start, issue.line_end),
            _position(issue.col_start, issue.col_end),
            Text(issue.severity or UNKNOWN_LABEL),
            Text(issue.rule_key or UNKNOWN_LABEL),
            Text(issue.message.splitlines()[0] if issue.message else UNKNOWN_LABEL),
        )
    return table


def _count_table(title: str, counts: Counter[str]) -> Table:
    table = Table(title=title)
    table.add_column("Key", no_wrap=True)
    table.add_column("Count", justify="right")
    for key, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        table.add_row(Text(key), str(count))
    return table


@app.command("convert")
def convert(
    report: Path = typer.Argument(..., metavar="REPORT", help="Clippy JSON-lines report to convert."),
    output_format: OutputFormat = typer.Option(OutputFormat.JSON, "--format", "-f", help="Output format."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the rendered issues to this file."),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Configuration file to load."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped diagnostics to stderr."),
) -> None:
    """Convert a Clippy report into normalised issue records."""

    use_color = not no_color and detect_tty()
    use_emoji = not no_emoji
    if verbose:
        enable_debug_logging()
    issues = _load(report, config_path, use_emoji=use_emoji, use_color=use_color)

    if output_format is OutputFormat.TABLE:
        if output is not None:
            warn("--output is ignored for table output", use_emoji=use_emoji, use_color=use_color)
        get_console(color=use_color, emoji=use_emoji).print(_issue_table(issues))
        return

    rendered = render_issues(issues, "jsonl" if output_format is OutputFormat.JSONL else "json")
    if output is None:
        typer.echo(rendered)
        return
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(f"{rendered}\n" if rendered else "", encoding="utf-8")
    except OSError as exc:
        fail(f"Unable to write {output}: {exc}", use_emoji=use_emoji, use_color=use_color)
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc
    ok(f"Wrote {len(issues)} issue(s) to {output}", use_emoji=use_emoji, use_color=use_color)


@app.command("summary")
def summary(
    report: Path = typer.Argument(..., metavar="REPORT", help="Clippy JSON-lines report to summarise."),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Configuration file to load."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output."),
) -> None:
    """Print issue counts grouped by severity and rule."""

    use_color = not no_color and detect_tty()
    use_emoji = not no_emoji
    info(f"Summarising {report}", use_emoji=use_emoji, use_color=use_color)
    issues = _load(report, config_path, use_emoji=use_emoji, use_color=use_color)
    if not issues:
        ok("No Clippy issues found", use_emoji=use_emoji, use_color=use_color)
        return

    console = get_console(color=use_color, emoji=use_emoji)
    section(f"{len(issues)} issue(s)", use_color=use_color)
    console.print(_count_table("By severity", Counter(issue.severity or UNKNOWN_LABEL for issue in issues)))
    console.print(_count_table("By rule", Counter(issue.rule_key or UNKNOWN_LABEL for issue in issues)))


__all__ = ["OutputFormat", "app", "convert", "summary"]
