"""File discovery and lint runs over a project tree."""

import fnmatch
import time
from collections import Counter
from datetime import datetime
from pathlib import Path

from oxmigrate import __version__
from oxmigrate.analysis.comments import language_for_path
from oxmigrate.analysis.fixes import apply_fixes
from oxmigrate.analysis.rule import NoEslintDisableComments
from oxmigrate.config import (
    get_analysis_excludes,
    get_analysis_includes,
    get_directive_kinds,
    get_severity,
)
from oxmigrate.errors import SourceReadError, SourceWriteError
from oxmigrate.exclusion import FileExcluder
from oxmigrate.models.results import FileReport, RunMetadata, RunResults, RunSummary


def find_source_files(
    path: Path,
    includes: list[str],
    excludes: list[str],
    include_ignored: bool = False,
) -> list[Path]:
    """Find source files matching include/exclude patterns."""
    excluder = FileExcluder(path, include_ignored=include_ignored, extra_excludes=excludes)

    source_files: list[Path] = []

    for candidate in sorted(path.rglob("*")):
        if not candidate.is_file():
            continue
        if excluder.should_exclude(candidate):
            continue

        rel_str = candidate.relative_to(path).as_posix()
        if _matches_any(rel_str, includes):
            source_files.append(candidate)

    return source_files


def _matches_any(rel_str: str, patterns: list[str]) -> bool:
    for pattern in patterns:
        if fnmatch.fnmatch(rel_str, pattern):
            return True
        # "**/*.js" should also match files at the root
        if pattern.startswith("**/") and fnmatch.fnmatch(rel_str, pattern[3:]):
            return True
    return False


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        SourceReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e


def write_source(path: Path, text: str) -> None:
    """Write fixed source text back to a file.

    Raises:
        SourceWriteError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise SourceWriteError(path, str(e)) from e


def lint_file(path: Path, rule: NoEslintDisableComments, fix: bool = False) -> FileReport:
    """Lint one file, writing the fixed source back when ``fix`` is set."""
    source = read_source(path)
    report = FileReport(file=path, diagnostics=rule.run(source, language_for_path(path)))

    if fix and report.diagnostics:
        fixed, applied = apply_fixes(source, report.diagnostics)
        if fixed != source:
            write_source(path, fixed)
        report.fixes_applied = applied

    return report


def rule_from_config(config: dict) -> NoEslintDisableComments:
    """Build the rule with the directive kinds and severity from config."""
    return NoEslintDisableComments(
        kinds=get_directive_kinds(config),
        severity=get_severity(config),
    )


def run(
    path: Path,
    config: dict,
    fix: bool = False,
    include_ignored: bool = False,
) -> RunResults:
    """Lint every matching file under ``path`` and aggregate the results."""
    start_time = time.time()

    rule = rule_from_config(config)
    files = find_source_files(
        path,
        get_analysis_includes(config),
        get_analysis_excludes(config),
        include_ignored,
    )

    results = RunResults()
    for source_file in files:
        try:
            report = lint_file(source_file, rule, fix=fix)
        except (SourceReadError, SourceWriteError) as e:
            results.errors.append(str(e))
            continue
        if report.diagnostics:
            results.files.append(report)

    duration_ms = int((time.time() - start_time) * 1000)
    results.metadata = RunMetadata(
        project=str(path),
        analyzed_at=datetime.now(),
        oxmigrate_version=__version__,
        files_scanned=len(files),
        duration_ms=duration_ms,
    )
    results.summary = _build_summary(results)

    return results


def _build_summary(results: RunResults) -> RunSummary:
    diagnostics = results.diagnostics
    by_directive = Counter(d.kind.keyword for d in diagnostics)
    return RunSummary(
        diagnostics=len(diagnostics),
        files_with_diagnostics=len(results.files),
        fixes_applied=sum(report.fixes_applied for report in results.files),
        by_directive=dict(sorted(by_directive.items())),
    )
