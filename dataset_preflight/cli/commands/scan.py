"""Scan command - lint a dataset directory and print a compliance report."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ..helpers import PreflightCommandOptions, dataset_options, run_preflight
from ..presenters.report import ReportPresenter

console = Console()


@click.command()
@dataset_options
@click.pass_context
def scan_command(ctx: click.Context, dataset_path: Path, **options: object) -> None:
    """Scan and validate a dataset.

    Walks the dataset directory, analyzes every file (tabular files get
    delimiter, header and per-column type inference), checks structure,
    naming, metadata, FAIR and data-quality rules, and prints a short report.

    Exit codes: 0 when the dataset passes, 1 for warnings or a score below
    80, 2 for critical issues, a score below 50, or a fatal error.

    Examples:

    \b
        # Quick scan without hashing
        dataset-preflight scan ./my-dataset --no-hash
    """
    command_options = PreflightCommandOptions.from_kwargs(dict(options))
    response = run_preflight(dataset_path, command_options, console=console)
    if not command_options.quiet:
        ReportPresenter(console).present(response)
    ctx.exit(response.exit_code)
