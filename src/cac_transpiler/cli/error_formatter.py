"""Rendering of OSCAL validation results with Rich.

Issue paths such as ``catalog.groups.0.controls.1.id`` are shown split
into the document kind (``catalog``), the assembly holding the offending
field (``groups[0].controls[1]``) and the field itself (``id``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from cac_transpiler.validation.errors import ValidationSeverity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cac_transpiler.validation.errors import ValidationIssue, ValidationResult

DOCUMENT_ROOT = "(document root)"

_COLORS = {ValidationSeverity.ERROR: "red", ValidationSeverity.WARNING: "yellow"}


def split_issue_path(path: str) -> tuple[str, str, str]:
    """Split an issue path into (document kind, assembly, field).

    List indices are attached to the name before them. The field is the
    last named segment, so an issue about a whole list entry names that
    entry as its field.

    Examples
    --------
        >>> split_issue_path("catalog.groups.0.controls.1.id")
        ('catalog', 'groups[0].controls[1]', 'id')
        >>> split_issue_path("profile.imports.0")
        ('profile', '', 'imports[0]')

    """
    document, _, rest = path.partition(".")
    segments: list[str] = []
    for part in rest.split(".") if rest else []:
        if part.isdigit() and segments:
            segments[-1] += f"[{part}]"
        else:
            segments.append(part)
    if not segments:
        return document, "", ""
    return document, ".".join(segments[:-1]), segments[-1]


def group_issues(issues: Iterable[ValidationIssue]) -> dict[str, dict[str, list[ValidationIssue]]]:
    """Group issues by document kind, then by assembly, in report order."""
    grouped: dict[str, dict[str, list[ValidationIssue]]] = {}
    for issue in issues:
        document, assembly, _ = split_issue_path(issue.path)
        by_assembly = grouped.setdefault(document, {})
        by_assembly.setdefault(assembly or DOCUMENT_ROOT, []).append(issue)
    return grouped


def offending_value(issue: ValidationIssue) -> str | None:
    """Return the id, uuid or other value an issue is about, if known."""
    value = issue.context.get("value")
    return None if value is None else str(value)


def _issue_line(issue: ValidationIssue) -> str:
    color = _COLORS[issue.severity]
    _, _, field = split_issue_path(issue.path)
    target = f"[bold]{escape(field)}[/bold]: " if field else ""
    return f"[{color}]\\[{issue.code}][/{color}] {target}{escape(issue.message)}"


class ErrorFormatter:
    """Prints validation results grouped by document and assembly."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def format_validation_result(
        self,
        result: ValidationResult,
        source_path: Path | None = None,
    ) -> None:
        """Format and print validation result.

        Args:
        ----
            result: The validation result to format.
            source_path: Path to source file (for display).

        """
        if not result.issues:
            self.console.print("[green]✓ Validation passed[/green]")
            return

        errors = len(result.errors)
        warnings = len(result.warnings)
        self.console.print(self._summary(errors, warnings, source_path))

        for document, by_assembly in group_issues(result.issues).items():
            self.console.print()
            self.console.print(f"[bold cyan]{document}[/bold cyan]")
            for assembly, issues in by_assembly.items():
                self.console.print(f"  [cyan]{escape(assembly)}[/cyan]")
                for issue in issues:
                    self._print_issue(issue)

        self.console.print()
        counts = []
        if errors:
            counts.append(f"[red bold]✗ {errors} error(s)[/red bold]")
        if warnings:
            counts.append(f"[yellow]{warnings} warning(s)[/yellow]")
        self.console.print(", ".join(counts))

    def _summary(self, errors: int, warnings: int, source_path: Path | None) -> Panel:
        content = Text()
        if source_path:
            content.append(f"File: {source_path}\n", style="dim")
        if errors:
            content.append(f"Errors: {errors}  ", style="red bold")
        if warnings:
            content.append(f"Warnings: {warnings}", style="yellow")

        if errors:
            return Panel(content, title="Validation Failed", border_style="red")
        return Panel(content, title="Validation Warnings", border_style="yellow")

    def _print_issue(self, issue: ValidationIssue) -> None:
        self.console.print(f"    {_issue_line(issue)}", highlight=False)
        value = offending_value(issue)
        if value is not None and value not in issue.message:
            self.console.print(f"      [dim]value: {escape(repr(value))}[/dim]", highlight=False)
        if issue.suggestion:
            self.console.print(f"      [green]💡 {escape(issue.suggestion)}[/green]")


class ErrorTree:
    """Display issues as a document > assembly > issue tree."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error tree formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as tree."""
        tree = Tree("[bold]Validation Issues[/bold]")

        for document, by_assembly in group_issues(result.issues).items():
            total = sum(len(issues) for issues in by_assembly.values())
            document_node = tree.add(f"[bold cyan]{document}[/bold cyan] ({total} issues)")
            for assembly, issues in by_assembly.items():
                assembly_node = document_node.add(f"[cyan]{escape(assembly)}[/cyan]")
                for issue in issues:
                    assembly_node.add(_issue_line(issue))

        self.console.print(tree)


class ErrorTable:
    """Display issues as a table with one row per offending field."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error table formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as table."""
        table = Table(title="Validation Issues")

        table.add_column("Code", style="cyan", no_wrap=True)
        table.add_column("Document")
        table.add_column("Assembly", style="dim")
        table.add_column("Field")
        table.add_column("Value")
        table.add_column("Message")

        for issue in result.issues:
            color = _COLORS[issue.severity]
            document, assembly, field = split_issue_path(issue.path)
            table.add_row(
                f"[{color}]{issue.code}[/{color}]",
                document,
                escape(assembly or DOCUMENT_ROOT),
                escape(field or "-"),
                escape(offending_value(issue) or "-"),
                escape(issue.message),
            )

        self.console.print(table)
