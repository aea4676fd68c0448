"""oxmigrate CLI - move eslint suppression comments to oxlint."""

import difflib
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from oxmigrate import __version__
from oxmigrate.analysis.comments import language_for_path
from oxmigrate.analysis.fixes import apply_fixes
from oxmigrate.config import (
    get_analysis_excludes,
    get_analysis_includes,
    load_config_or_default,
)
from oxmigrate.errors import SourceReadError
from oxmigrate.models.diagnostic import Diagnostic
from oxmigrate.models.directive import DirectiveKind
from oxmigrate.models.results import FileReport, RunResults
from oxmigrate.models.source import Span
from oxmigrate.output.json_writer import load_results, write_default_config, write_results
from oxmigrate.output.tree import build_results_tree, build_summary_tree, display_tree
from oxmigrate.paths import ensure_oxmigrate_dir, get_config_path, get_results_path
from oxmigrate.runner import find_source_files, read_source, rule_from_config, run

app = typer.Typer(
    name="oxmigrate",
    help="Rename eslint-disable comments to their oxlint equivalents",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"oxmigrate version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Rename eslint-disable comments to their oxlint equivalents."""


def _load_config(path: Path, config: Optional[Path]) -> dict:
    """Load the given config file, or the project config with defaults."""
    if config is not None and not config.exists():
        console.print(f"[red]Config file not found:[/] {config}")
        raise typer.Exit(1)

    try:
        config_data = load_config_or_default(config or get_config_path(path))
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid config file:[/] {e}")
        raise typer.Exit(1)

    try:
        rule_from_config(config_data)
    except ValueError as e:
        console.print(f"[red]Invalid config:[/] {e}")
        raise typer.Exit(1)

    return config_data


@app.command()
def init(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a default config file to .oxmigrate/config.json."""
    path = path.resolve()
    config_path = get_config_path(path)

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/] {config_path}")
        console.print("Use [bold]--force[/] to overwrite it.")
        raise typer.Exit(1)

    ensure_oxmigrate_dir(path)
    write_default_config(config_path)
    console.print(f"[green]Configuration saved to:[/] {config_path}")


@app.command()
def check(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project to check",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: .oxmigrate/config.json)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path for results JSON output (default: .oxmigrate/results.json)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show every diagnostic as a tree",
    ),
    include_ignored: bool = typer.Option(
        False,
        "--include-ignored",
        help="Include files normally excluded by ignore files and config",
    ),
    exit_zero: bool = typer.Option(
        False,
        "--exit-zero",
        help="Exit with code 0 even when diagnostics are found",
    ),
) -> None:
    """Report eslint-disable comments."""
    path = path.resolve()
    config_data = _load_config(path, config)

    if output is None:
        ensure_oxmigrate_dir(path)
        output = get_results_path(path)

    results = _run_with_progress(path, config_data, include_ignored)

    write_results(results, output)
    console.print(f"\n[green]Results saved to:[/] {output}")

    if verbose:
        display_tree(build_results_tree(results.files, path))
    _display_summary(results)

    if results.files and not exit_zero:
        raise typer.Exit(1)


@app.command()
def fix(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project to fix",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: .oxmigrate/config.json)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show the changes as diffs without writing files",
    ),
    include_ignored: bool = typer.Option(
        False,
        "--include-ignored",
        help="Include files normally excluded by ignore files and config",
    ),
) -> None:
    """Rename eslint-disable comments to oxlint-disable in place."""
    path = path.resolve()
    config_data = _load_config(path, config)

    if dry_run:
        _show_fix_dry_run(path, config_data, include_ignored)
        return

    results = _run_with_progress(path, config_data, include_ignored, fix=True)

    for report in results.files:
        console.print(f"[green]Fixed[/] {_relative(report.file, path)} ({report.fixes_applied})")
    _display_summary(results)


@app.command()
def show(
    results_path: Optional[Path] = typer.Argument(
        None,
        help="Path to results file (default: .oxmigrate/results.json)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show full tree view",
    ),
) -> None:
    """Display results from a previous check run."""
    if results_path is None:
        results_path = get_results_path(Path.cwd())

    if not results_path.exists():
        console.print(f"[red]Results file not found:[/] {results_path}")
        raise typer.Exit(1)

    try:
        data = load_results(results_path)
        reports = _reports_from_results(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        console.print(f"[red]Invalid results file:[/] {results_path} ({e})")
        raise typer.Exit(1)

    if verbose:
        project_root = Path(data.get("metadata", {}).get("project", "."))
        display_tree(build_results_tree(reports, project_root))
    else:
        display_tree(build_summary_tree(reports))


def _run_with_progress(
    path: Path,
    config: dict,
    include_ignored: bool,
    fix: bool = False,
) -> RunResults:
    """Run the lint with a spinner, reporting read and write errors afterwards."""
    console.print(Panel.fit("[bold blue]oxmigrate - eslint directive migration[/]"))
    console.print(f"\n[dim]Scanning:[/] {path}\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Checking comments...", total=None)
        results = run(path, config, fix=fix, include_ignored=include_ignored)
        progress.update(task, completed=True)

    for error in results.errors:
        console.print(f"[yellow]![/] {error}")

    return results


def _show_fix_dry_run(path: Path, config: dict, include_ignored: bool) -> None:
    """Print unified diffs of the fixes without touching any file."""
    rule = rule_from_config(config)
    files = find_source_files(
        path,
        get_analysis_includes(config),
        get_analysis_excludes(config),
        include_ignored,
    )

    console.print(Panel.fit("[bold cyan]Dry Run Preview[/]"))

    changed = 0
    for source_file in files:
        try:
            source = read_source(source_file)
        except SourceReadError as e:
            console.print(f"[yellow]![/] {e}")
            continue

        fixed, _ = apply_fixes(source, rule.run(source, language_for_path(source_file)))
        if fixed == source:
            continue

        changed += 1
        rel = _relative(source_file, path)
        diff = "".join(
            difflib.unified_diff(
                source.splitlines(keepends=True),
                fixed.splitlines(keepends=True),
                fromfile=f"a/{rel}",
                tofile=f"b/{rel}",
            )
        )
        console.print(Syntax(diff, "diff", theme="ansi_dark"))

    console.print(f"\n[dim]Files that would change:[/] {changed}")


def _reports_from_results(data: dict) -> list[FileReport]:
    """Rebuild file reports from a loaded results.json."""
    reports = []
    for item in data.get("files", []):
        diagnostics = [
            Diagnostic(
                rule=d.get("rule", ""),
                kind=DirectiveKind.from_keyword(d.get("directive", "disable")),
                span=Span(d["span"]["start"], d["span"]["end"]),
                message=d.get("message", ""),
                help=d.get("help", ""),
                line=d.get("line", 0),
                column=d.get("column", 0),
                severity=d.get("severity", "warning"),
            )
            for d in item.get("diagnostics", [])
        ]
        reports.append(
            FileReport(
                file=Path(item.get("file", "")),
                diagnostics=diagnostics,
                fixes_applied=item.get("fixes_applied", 0),
            )
        )
    return reports


def _relative(file_path: Path, root: Path) -> str:
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return str(file_path)


def _display_summary(results: RunResults) -> None:
    """Display run summary."""
    if not results.summary:
        return

    summary = results.summary

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    if results.metadata:
        table.add_row("Files scanned", str(results.metadata.files_scanned))
    table.add_row("Files with directives", str(summary.files_with_diagnostics))
    table.add_row("Total directives", str(summary.diagnostics))

    for keyword, count in summary.by_directive.items():
        table.add_row(f"  eslint-{keyword}", str(count))

    if summary.fixes_applied:
        table.add_row("", "")
        table.add_row("Fixes applied", f"[green]{summary.fixes_applied}[/]")

    if results.errors:
        table.add_row("Files with errors", f"[yellow]{len(results.errors)}[/]")

    console.print(Panel(table, title="[bold]eslint Directive Summary[/]", border_style="blue"))


if __name__ == "__main__":
    app()
