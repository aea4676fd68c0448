"""Tests for the output module."""

import json
from datetime import datetime
from pathlib import Path

from rich.console import Console

from oxmigrate.models.diagnostic import Diagnostic, Fix
from oxmigrate.models.directive import DirectiveKind
from oxmigrate.models.results import FileReport, RunMetadata, RunResults, RunSummary
from oxmigrate.models.source import Span
from oxmigrate.output.json_writer import load_results, write_default_config, write_results
from oxmigrate.output.tree import build_results_tree, build_summary_tree


def make_report(file: Path) -> FileReport:
    """Helper to create a report with one diagnostic of each kind."""
    diagnostics = [
        Diagnostic(
            rule="oxc/no-eslint-disable-comments",
            kind=DirectiveKind.DISABLE,
            span=Span(2, 17),
            message="Detected eslint disable comment",
            help="Prefer oxlint-disable instead of eslint-disable",
            line=1,
            column=3,
            fix=Fix(span=Span(2, 17), replacement=" oxlint-disable"),
        ),
        Diagnostic(
            rule="oxc/no-eslint-disable-comments",
            kind=DirectiveKind.DISABLE_NEXT_LINE,
            span=Span(30, 55),
            message="Detected eslint disable comment",
            help="Prefer oxlint-disable-next-line instead of eslint-disable-next-line",
            line=4,
            column=3,
        ),
    ]
    return FileReport(file=file, diagnostics=diagnostics)


def render(renderable) -> str:
    console = Console(record=True, width=200)
    console.print(renderable)
    return console.export_text()


class TestWriteResults:
    def test_writes_valid_json(self, tmp_path: Path):
        results = RunResults(
            metadata=RunMetadata(
                project=str(tmp_path),
                analyzed_at=datetime(2024, 1, 2, 3, 4, 5),
                oxmigrate_version="0.1.0",
                files_scanned=3,
                duration_ms=12,
            ),
            summary=RunSummary(
                diagnostics=2,
                files_with_diagnostics=1,
                by_directive={"disable": 1, "disable-next-line": 1},
            ),
            files=[make_report(tmp_path / "a.js")],
        )
        output = tmp_path / "results.json"

        write_results(results, output)
        data = load_results(output)

        assert data["version"] == "1.0"
        assert data["metadata"]["analyzed_at"] == "2024-01-02T03:04:05"
        assert data["metadata"]["files_scanned"] == 3
        assert data["summary"]["diagnostics"] == 2
        assert data["errors"] == []

        [file_entry] = data["files"]
        assert file_entry["file"] == str(tmp_path / "a.js")
        first, second = file_entry["diagnostics"]
        assert first["directive"] == "disable"
        assert first["span"] == {"start": 2, "end": 17}
        assert first["fix"] == {"span": {"start": 2, "end": 17}, "replacement": " oxlint-disable"}
        assert second["directive"] == "disable-next-line"
        assert "fix" not in second

    def test_empty_results(self, tmp_path: Path):
        output = tmp_path / "results.json"
        write_results(RunResults(), output)

        assert load_results(output) == {"version": "1.0", "files": [], "errors": []}


class TestWriteDefaultConfig:
    def test_includes_required_sections(self, tmp_path: Path):
        output = tmp_path / "config.json"

        write_default_config(output)

        with open(output) as f:
            data = json.load(f)
        assert "$schema" in data
        assert "version" in data
        assert "analysis" in data
        assert "rule" in data


class TestTrees:
    def test_results_tree_groups_by_directory(self, tmp_path: Path):
        reports = [make_report(tmp_path / "src" / "a.js")]

        text = render(build_results_tree(reports, tmp_path))

        assert "src/" in text
        assert "a.js" in text
        assert "eslint-disable-next-line" in text
        assert "line 4, col 3" in text

    def test_summary_tree(self, tmp_path: Path):
        reports = [make_report(tmp_path / "a.js"), make_report(tmp_path / "b.js")]

        text = render(build_summary_tree(reports))

        assert "eslint-disable (2 comments)" in text
        assert "eslint-disable-next-line (2 comments)" in text
        assert "oxlint-disable-next-line" in text
        assert "Files: 2" in text
