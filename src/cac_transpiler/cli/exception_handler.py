"""Reporting of errors raised by CLI commands."""

from __future__ import annotations

import traceback
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cac_transpiler.cli.error_formatter import ErrorFormatter
from cac_transpiler.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from cac_transpiler.models.loader import LoaderError
from cac_transpiler.transform.errors import TranspileError
from cac_transpiler.validation.validator import ValidationError

console = Console(stderr=True)


@contextmanager
def handle_exceptions(verbose: bool = False) -> Iterator[None]:
    """Report errors raised inside a CLI command and exit with status 1.

    Usage:
        with handle_exceptions(verbose):
            guidance = load_guidance_document(path)

    Args:
    ----
        verbose: Whether to show causes and full tracebacks.

    Raises:
    ------
        typer.Exit: With code 1 after reporting the error.

    """
    try:
        yield
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        report_error(e, verbose)
        raise typer.Exit(1) from None


def report_error(error: Exception, verbose: bool = False) -> None:
    """Print an error raised while loading, converting or validating documents."""
    if isinstance(error, ValidationError):
        console.print(f"[red bold]Generated OSCAL is not valid[/red bold] ({error})")
        ErrorFormatter(console).format_validation_result(error.result)
    elif isinstance(error, PydanticValidationError):
        _report_input_errors(error, verbose)
    elif isinstance(error, LoaderError):
        _panel(escape(str(error)), "Failed to load input")
        if verbose and error.__cause__ is not None:
            console.print(f"[dim]Caused by: {escape(repr(error.__cause__))}[/dim]")
    elif isinstance(error, TranspileError):
        body = escape(str(error))
        if error.field:
            body += f"\n\nCheck the '{escape(error.field)}' field of the input document."
        _panel(body, "Transformation failed")
    elif isinstance(error, OSError):
        reason = error.strerror or str(error)
        _panel(f"{escape(reason)}: {escape(str(error.filename or 'unknown'))}", "Cannot access file")
    else:
        _panel(f"An unexpected error occurred:\n{escape(str(error))}", "Error")
        if verbose:
            console.print("\n[dim]Traceback:[/dim]")
            console.print(
                "".join(traceback.format_exception(type(error), error, error.__traceback__)),
                markup=False,
            )
        else:
            console.print("\n[dim]Use --verbose for full traceback[/dim]")


def _panel(body: str, title: str) -> None:
    console.print(Panel(f"[red]{body}[/red]", title=title, border_style="red"))


def _report_input_errors(error: PydanticValidationError, verbose: bool) -> None:
    """Print each field error of an input document that failed to parse."""
    console.print(f"[red bold]Invalid {error.title} document[/red bold]")
    console.print()

    for err in error.errors():
        console.print(f"[red]✗[/red] {escape(format_pydantic_location(err['loc']))}")
        console.print(f"  {escape(translate_pydantic_error(err))}")
        console.print(f"  [dim]({err['type']})[/dim]")

        suggestion = get_suggestion_for_error(err)
        if suggestion:
            console.print(f"  [green]💡 {escape(suggestion)}[/green]")

        console.print()

    if verbose:
        console.print("[dim]Full error:[/dim]")
        console.print(str(error), markup=False)
