"""Rich tree visualization for lint results."""

from pathlib import Path

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from oxmigrate.models.results import FileReport

console = Console()


def build_results_tree(
    reports: list[FileReport],
    project_root: Path,
) -> Tree:
    """Build a Rich tree showing diagnostics by file."""
    by_file: dict[Path, FileReport] = {}
    for report in reports:
        try:
            rel_path = report.file.relative_to(project_root)
        except ValueError:
            rel_path = report.file
        by_file[rel_path] = report

    root = Tree(
        f"[bold]{project_root.name or project_root}[/]",
        guide_style="dim",
    )

    # Track directories we've added
    dir_nodes: dict[Path, Tree] = {}

    for file_path in sorted(by_file):
        report = by_file[file_path]

        # Create directory nodes as needed
        parent = root
        for i, part in enumerate(file_path.parts[:-1]):
            dir_path = Path(*file_path.parts[: i + 1])
            if dir_path not in dir_nodes:
                dir_nodes[dir_path] = parent.add(f"[bold blue]{part}/[/]")
            parent = dir_nodes[dir_path]

        file_node = parent.add(f"[yellow]{file_path.name}[/]")

        for diagnostic in sorted(report.diagnostics, key=lambda d: (d.line, d.column)):
            item_text = Text()
            item_text.append("! ", style=f"{_severity_color(diagnostic.severity)} bold")
            item_text.append(f"eslint-{diagnostic.kind.keyword}", style="red")
            item_text.append(f" (line {diagnostic.line}, col {diagnostic.column}) ", style="dim")
            item_text.append(diagnostic.help, style="green")

            file_node.add(item_text)

    return root


def _severity_color(severity: str) -> str:
    """Get color based on severity."""
    if severity == "error":
        return "red"
    if severity == "warning":
        return "yellow"
    return "cyan"


def display_tree(tree: Tree) -> None:
    """Display the tree to console."""
    console.print()
    console.print(tree)
    console.print()


def build_summary_tree(reports: list[FileReport]) -> Tree:
    """Build a summary tree grouped by directive."""
    by_directive: dict[str, list[tuple[FileReport, int]]] = {}
    for report in reports:
        for diagnostic in report.diagnostics:
            by_directive.setdefault(diagnostic.kind.keyword, []).append((report, diagnostic.line))

    root = Tree("[bold]eslint Directive Summary[/]", guide_style="dim")

    for keyword, occurrences in sorted(by_directive.items()):
        files = {report.file for report, _ in occurrences}
        type_node = root.add(f"[cyan]eslint-{keyword}[/] ({len(occurrences)} comments)")
        type_node.add(f"Files: {len(files)}")
        type_node.add(f"Fix: rename to [green]oxlint-{keyword}[/]")

        examples_node = type_node.add("[dim]Examples:[/]")
        for report, line in occurrences[:3]:
            examples_node.add(f"{report.file.name}:{line}")

    return root
