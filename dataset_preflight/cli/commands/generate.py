"""Generate command - lint a dataset and write the documentation it lacks."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ..helpers import PreflightCommandOptions, dataset_options, run_preflight
from ..presenters.report import ReportPresenter

console = Console()


@click.command()
@dataset_options
@click.option(
    "--profiles",
    "write_profiles",
    is_flag=True,
    help="Also write a <stem>.profile.csv column profile per tabular file",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    dataset_path: Path,
    write_profiles: bool,
    **options: object,
) -> None:
    """Scan, validate, and generate missing documentation.

    Writes README.md, metadata.json, DATACARD.md, MANIFEST.sha256 and one
    JSON Schema per tabular file, skipping any file the dataset already has.
    Validation reflects the dataset as it was before generation.

    Examples:

    \b
        # Generate documentation next to the data
        dataset-preflight generate ./my-dataset

    \b
        # Write into a separate directory, including column profiles
        dataset-preflight generate ./my-dataset -o ./docs --profiles
    """
    command_options = PreflightCommandOptions.from_kwargs(dict(options))
    response = run_preflight(
        dataset_path,
        command_options,
        console=console,
        generate=True,
        write_profiles=write_profiles,
    )
    if not command_options.quiet:
        ReportPresenter(console).present(response)
    ctx.exit(response.exit_code)
