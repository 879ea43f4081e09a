"""Report command - print a detailed compliance report, or JSON for CI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...constants import Defaults
from ...infrastructure.io.exceptions import DocumentWriteError
from ..helpers import (
    PreflightCommandOptions,
    build_container,
    dataset_options,
    fail,
    run_preflight,
)
from ..presenters.report import ReportPresenter

console = Console()


@click.command()
@dataset_options
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output the report as JSON (written to <output-dir>/"
    f"{Defaults.REPORT_FILE_NAME} when --output-dir is given)",
)
@click.pass_context
def report_command(
    ctx: click.Context,
    dataset_path: Path,
    json_output: bool,
    **options: object,
) -> None:
    """Generate a detailed compliance report.

    Lists every issue and a per-column breakdown of each tabular file. With
    --json the report is emitted as a JSON document suitable for CI/CD.

    Examples:

    \b
        # JSON report for CI/CD
        dataset-preflight report ./my-dataset --json

    \b
        # Save the JSON report next to other build artifacts
        dataset-preflight report ./my-dataset --json -o ./artifacts
    """
    command_options = PreflightCommandOptions.from_kwargs(dict(options))
    container = build_container(
        dataset_path, command_options, console=console, silent=json_output
    )
    response = run_preflight(
        dataset_path, command_options, console=console, container=container
    )
    if json_output:
        writer = container.create_report_writer()
        if command_options.output_dir is not None:
            try:
                path = writer.write_json(
                    command_options.output_dir / Defaults.REPORT_FILE_NAME, response
                )
            except DocumentWriteError as e:
                fail(console, e)
            if not command_options.quiet:
                click.echo(f"Report written to {path}", err=True)
        else:
            click.echo(writer.render(response), nl=False)
    elif not command_options.quiet:
        ReportPresenter(console).present(response, detailed=True)
    ctx.exit(response.exit_code)
