# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the convert and summary commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner

from clippyqa.cli.app import app

DiagnosticFactory = Callable[..., dict[str, object]]
ReportWriter = Callable[..., Path]


def test_convert_outputs_json(write_report: ReportWriter, needless_return_line: str) -> None:
    runner = CliRunner()
    report = write_report("    Checking demo", needless_return_line)

    result = runner.invoke(app, ["convert", str(report)])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == [
        {
            "filePath": "src/lib.rs",
            "ruleKey": "clippy::needless_return",
            "message": "unneeded return",
            "lineStart": 10,
            "lineEnd": 10,
            "colStart": 5,
            "colEnd": 17,
            "severity": "warning",
        },
    ]


def test_convert_jsonl_to_file(
    tmp_path: Path,
    write_report: ReportWriter,
    make_diagnostic: DiagnosticFactory,
) -> None:
    runner = CliRunner()
    report = write_report(make_diagnostic(code="a"), make_diagnostic(code="b"))
    output = tmp_path / "out" / "issues.jsonl"

    result = runner.invoke(app, ["convert", str(report), "--format", "jsonl", "--output", str(output), "--no-emoji"])

    assert result.exit_code == 0
    assert "Wrote 2 issue(s)" in result.stdout
    lines = output.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["ruleKey"] for line in lines] == ["a", "b"]


def test_convert_table(write_report: ReportWriter, make_diagnostic: DiagnosticFactory) -> None:
    runner = CliRunner()
    report = write_report(make_diagnostic(code="E0308", file_name="main.rs"))

    result = runner.invoke(app, ["convert", str(report), "--format", "table", "--no-color"])

    assert result.exit_code == 0
    assert "E0308" in result.stdout
    assert "main.rs" in result.stdout


def test_convert_missing_report(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["convert", str(tmp_path / "missing.log"), "--no-emoji", "--no-color"])

    assert result.exit_code == 2
    assert "not found" in result.stdout


def test_convert_parse_error(write_report: ReportWriter) -> None:
    runner = CliRunner()
    report = write_report("{oops}")

    result = runner.invoke(app, ["convert", str(report), "--no-emoji"])

    assert result.exit_code == 2
    assert "not valid JSON" in result.stdout


def test_convert_with_config(tmp_path: Path, write_report: ReportWriter, make_diagnostic: DiagnosticFactory) -> None:
    runner = CliRunner()
    config = tmp_path / "settings.toml"
    config.write_text('noise_levels = ["help"]\n', encoding="utf-8")
    report = write_report(make_diagnostic(children=[{"level": "help", "message": "hidden"}]))

    result = runner.invoke(app, ["convert", str(report), "--config", str(config)])

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["message"] == "unneeded return"


def test_convert_bad_config(tmp_path: Path, write_report: ReportWriter, needless_return_line: str) -> None:
    runner = CliRunner()
    report = write_report(needless_return_line)

    result = runner.invoke(app, ["convert", str(report), "--config", str(tmp_path / "nope.toml"), "--no-emoji"])

    assert result.exit_code == 2
    assert "Configuration file not found" in result.stdout


def test_summary_counts(write_report: ReportWriter, make_diagnostic: DiagnosticFactory) -> None:
    runner = CliRunner()
    report = write_report(
        make_diagnostic(code="clippy::a", level="warning"),
        make_diagnostic(code="clippy::a", level="warning"),
        make_diagnostic(code="E0308", level="error"),
    )

    result = runner.invoke(app, ["summary", str(report), "--no-color", "--no-emoji"])

    assert result.exit_code == 0
    assert "3 issue(s)" in result.stdout
    assert "clippy::a" in result.stdout
    assert "warning" in result.stdout


def test_summary_empty_report(write_report: ReportWriter) -> None:
    runner = CliRunner()
    report = write_report("no json here")

    result = runner.invoke(app, ["summary", str(report), "--no-emoji"])

    assert result.exit_code == 0
    assert "No Clippy issues found" in result.stdout


def test_summary_names_the_report(write_report: ReportWriter, needless_return_line: str) -> None:
    runner = CliRunner()
    report = write_report(needless_return_line)

    result = runner.invoke(app, ["summary", str(report), "--no-color", "--no-emoji"])

    assert result.exit_code == 0
    assert f"Summarising {report}" in result.stdout


def test_convert_output_write_failure(tmp_path: Path, write_report: ReportWriter, needless_return_line: str) -> None:
    runner = CliRunner()
    report = write_report(needless_return_line)
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(report), "--output", str(blocker / "issues.json"), "--no-emoji"])

    assert result.exit_code == 2
    assert "Unable to write" in result.stdout
    assert not isinstance(result.exception, OSError)


def test_convert_help_lists_options() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["convert", "--help"])

    assert result.exit_code == 0
    for option in ("--format", "--output", "--config", "--verbose"):
        assert option in result.stdout
