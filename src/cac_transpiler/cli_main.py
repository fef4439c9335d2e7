"""Command-line interface for the cac-transpiler."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from cac_transpiler import __version__
from cac_transpiler.oscal.models import OscalModels, dump_oscal

# Create Typer app
app = typer.Typer(
    name="cac-transpiler",
    help="Convert Gemara compliance documents to OSCAL.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")

OUTPUT_FORMATS = ("json", "yaml")

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"cac-transpiler version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr; debug records only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert Gemara guidance documents, control catalogs and evaluation plans to OSCAL.

    Guidance documents become OSCAL catalogs and profiles; control catalogs
    and evaluation plans become OSCAL component definitions.
    """


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        error_console.print(
            f"\n[bold red]✗ Invalid format: {output_format}[/bold red]\n"
            f"Supported: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(code=1)


def _validate(models: OscalModels, strict: bool) -> None:
    from cac_transpiler.validation.validator import OscalValidator

    OscalValidator(strict=strict).validate_and_raise(models)


def _write_output(models: OscalModels, output: Path | None, output_format: str) -> None:
    """Write a document to a file, or to stdout when no file is given."""
    text = dump_oscal(models, "yaml" if output_format == "yaml" else "json")

    if output is None:
        typer.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"\n[bold green]✓ Wrote {', '.join(models.document_kinds())} to {output}[/bold green]\n")


InputFile = Annotated[
    Path,
    typer.Argument(
        help="Input YAML/JSON file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output file path. Defaults to stdout.",
        dir_okay=False,
        writable=True,
        resolve_path=True,
    ),
]

FormatOption = Annotated[
    str,
    typer.Option(
        "--format",
        "-f",
        help="Output format: json or yaml.",
    ),
]

ValidateOption = Annotated[
    bool,
    typer.Option(
        "--validate/--no-validate",
        help="Check the generated document before writing it.",
    ),
]

StrictOption = Annotated[
    bool,
    typer.Option(
        "--strict",
        help="Treat validation warnings as errors.",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-V",
        help="Show debug logging and full tracebacks.",
    ),
]


@app.command()
def catalog(
    input_file: InputFile,
    output: OutputOption = None,
    output_format: FormatOption = "json",
    validate: ValidateOption = True,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Convert the guidelines of a guidance document to an OSCAL catalog.

    Examples
    --------
        cac-transpiler catalog guidance.yml
        cac-transpiler catalog guidance.yml -o catalog.json
        cac-transpiler catalog guidance.yml --format yaml --no-validate

    """
    from cac_transpiler.cli.exception_handler import handle_exceptions
    from cac_transpiler.models.loader import load_guidance_document
    from cac_transpiler.transform.catalog import to_oscal_catalog

    setup_logging(verbose)
    _check_format(output_format)

    with handle_exceptions(verbose):
        guidance = load_guidance_document(input_file)
        models = OscalModels(catalog=to_oscal_catalog(guidance))
        if validate:
            _validate(models, strict)
        _write_output(models, output, output_format)


@app.command()
def profile(
    input_file: InputFile,
    output: OutputOption = None,
    output_format: FormatOption = "json",
    validate: ValidateOption = True,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Convert the shared guidelines of a guidance document to an OSCAL profile.

    Examples
    --------
        cac-transpiler profile guidance.yml
        cac-transpiler profile guidance.yml -o profile.yaml --format yaml

    """
    from cac_transpiler.cli.exception_handler import handle_exceptions
    from cac_transpiler.models.loader import load_guidance_document
    from cac_transpiler.transform.profile import to_oscal_profile

    setup_logging(verbose)
    _check_format(output_format)

    with handle_exceptions(verbose):
        guidance = load_guidance_document(input_file)
        models = OscalModels(profile=to_oscal_profile(guidance))
        if validate:
            _validate(models, strict)
        _write_output(models, output, output_format)


@app.command()
def component(
    input_file: InputFile,
    title: Annotated[
        str,
        typer.Option(
            "--title",
            "-t",
            help="Title of the target component.",
        ),
    ],
    component_type: Annotated[
        str,
        typer.Option(
            "--type",
            help="OSCAL type of the target component.",
        ),
    ] = "software",
    parameters_file: Annotated[
        Path | None,
        typer.Option(
            "--parameters",
            "-p",
            help="Parameters file keyed by assessment requirement ID.",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    plan_files: Annotated[
        list[Path] | None,
        typer.Option(
            "--plan",
            help="Evaluation plan; repeat for several plans.",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    modifiers_file: Annotated[
        Path | None,
        typer.Option(
            "--modifiers",
            "-m",
            help="Parameter modifiers to apply to the target component.",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    target_id: Annotated[
        str | None,
        typer.Option(
            "--target-id",
            help="Catalog the modifiers apply to. Defaults to the modifiers file's target-id.",
        ),
    ] = None,
    name: Annotated[
        str,
        typer.Option(
            "--name",
            help="Title of the component definition.",
        ),
    ] = "ComponentDefinition",
    definition_version: Annotated[
        str,
        typer.Option(
            "--version",
            help="Version of the component definition.",
        ),
    ] = "v0.1.0",
    output: OutputOption = None,
    output_format: FormatOption = "json",
    validate: ValidateOption = True,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Build an OSCAL component definition from a control catalog.

    The target component implements every control of the catalog. Each
    evaluation plan adds one validation component per executor.

    Examples
    --------
        cac-transpiler component osps.yml --title my-project
        cac-transpiler component osps.yml -t my-project -p parameters.yml --plan plan.yml
        cac-transpiler component osps.yml -t my-project -p parameters.yml -m modifiers.yml

    """
    from cac_transpiler.cli.exception_handler import handle_exceptions
    from cac_transpiler.component.builder import DefinitionBuilder
    from cac_transpiler.models.loader import (
        load_control_catalog,
        load_evaluation_plan,
        load_parameter_modifiers,
        load_parameters,
    )

    setup_logging(verbose)
    _check_format(output_format)

    with handle_exceptions(verbose):
        control_catalog = load_control_catalog(input_file)
        parameters = load_parameters(parameters_file) if parameters_file else {}

        builder = DefinitionBuilder(name, definition_version).add_target_component(
            title, component_type, control_catalog, parameters
        )

        for plan_file in plan_files or []:
            builder.add_validation_component(load_evaluation_plan(plan_file))

        if modifiers_file:
            modifier_set = load_parameter_modifiers(modifiers_file)
            builder.add_parameter_modifiers(
                target_id or modifier_set.target_id or control_catalog.metadata.id,
                modifier_set.modifiers,
            )

        models = OscalModels(component_definition=builder.build())
        if validate:
            _validate(models, strict)
        _write_output(models, output, output_format)


@app.command("validate")
def validate_command(
    input_file: InputFile,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for validation results: text, table, tree.",
        ),
    ] = "text",
    strict: StrictOption = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only output errors, no success messages.",
        ),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Validate an OSCAL catalog, profile or component definition.

    Checks the document against the OSCAL JSON schema and for duplicate
    identifiers, and reports links that do not resolve within the document.

    Examples
    --------
        cac-transpiler validate catalog.json
        cac-transpiler validate component-definition.yaml --format table
        cac-transpiler validate profile.json --strict

    """
    from cac_transpiler.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
    from cac_transpiler.cli.exception_handler import handle_exceptions
    from cac_transpiler.models.loader import load_oscal_models
    from cac_transpiler.validation.validator import OscalValidator

    setup_logging(verbose)

    with handle_exceptions(verbose):
        models = load_oscal_models(input_file)

    result = OscalValidator(strict=strict).validate(models)
    failed = not result.is_valid or (strict and bool(result.warnings))

    if not result.is_valid or result.warnings:
        if output_format == "table":
            ErrorTable(error_console).print_result(result)
        elif output_format == "tree":
            ErrorTree(error_console).print_result(result)
        else:
            ErrorFormatter(error_console).format_validation_result(result, input_file)

    if failed:
        raise typer.Exit(code=1)

    if not quiet:
        if result.warnings:
            console.print(
                f"\n[bold yellow]⚠ {input_file.name} is valid with warnings[/bold yellow]\n"
            )
        else:
            console.print(f"\n[bold green]✓ {input_file.name} is valid[/bold green]\n")


if __name__ == "__main__":
    app()
