"""Shared plumbing for the ``scan``, ``generate`` and ``report`` commands.

Every command takes the same dataset argument and most of the same flags;
this module turns those flags into a config, a container and a request, runs
the preflight use case, and maps fatal errors to exit code 2.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn, TypeVar, cast

import click
from rich.markup import escape

from ..application.models import PreflightRequest
from ..config import ConfigLoader
from ..infrastructure.container import DependencyContainer
from ..infrastructure.io.exceptions import PreflightInfrastructureError

if TYPE_CHECKING:
    from rich.console import Console

    from ..application.models import PreflightResponse

FATAL_EXIT_CODE = 2

F = TypeVar("F", bound=Callable[..., object])


@dataclass(frozen=True)
class PreflightCommandOptions:
    output_dir: Path | None
    config_file: Path | None
    verbose: int
    quiet: bool
    no_hash: bool

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> PreflightCommandOptions:
        return cls(
            output_dir=cast("Path | None", options.get("output_dir")),
            config_file=cast("Path | None", options.get("config_file")),
            verbose=cast("int", options.get("verbose", 0)),
            quiet=cast("bool", options.get("quiet", False)),
            no_hash=cast("bool", options.get("no_hash", False)),
        )

    def validate(self) -> None:
        if self.verbose and self.quiet:
            raise click.UsageError("Cannot use --verbose and --quiet together")


def dataset_options(func: F) -> F:
    """Attach the dataset argument and the flags shared by every command."""
    decorators = [
        click.argument("dataset_path", type=click.Path(path_type=Path)),
        click.option(
            "-o",
            "--output-dir",
            "output_dir",
            type=click.Path(file_okay=False, path_type=Path),
            help="Directory for generated files (default: the dataset root)",
        ),
        click.option(
            "--config",
            "config_file",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to a preflight.toml config file "
            "(default: <dataset>/preflight.toml, then ./preflight.toml)",
        ),
        click.option(
            "--no-hash",
            "no_hash",
            is_flag=True,
            help="Skip SHA-256 hashing for faster scanning",
        ),
        click.option(
            "-q", "--quiet", is_flag=True, help="Suppress all non-error output"
        ),
        click.option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity level (e.g., -v, -vv)",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_container(
    dataset_path: Path,
    options: PreflightCommandOptions,
    *,
    console: Console,
    silent: bool = False,
) -> DependencyContainer:
    """Validate the flags, load the config and wire up the adapters."""
    options.validate()
    config = ConfigLoader.load(options.config_file, dataset_root=dataset_path)
    if options.no_hash:
        config = replace(config, compute_hashes=False)
    return DependencyContainer(
        verbose=options.verbose,
        console=console,
        use_null_logger=options.quiet or silent,
        config=config,
    )


def run_preflight(
    dataset_path: Path,
    options: PreflightCommandOptions,
    *,
    console: Console,
    generate: bool = False,
    write_profiles: bool = False,
    silent: bool = False,
    container: DependencyContainer | None = None,
) -> PreflightResponse:
    """Run the use case, exiting with code 2 on fatal scan or write errors."""
    if container is None:
        container = build_container(
            dataset_path, options, console=console, silent=silent
        )
    use_case = container.create_preflight_use_case()
    request = PreflightRequest(
        dataset_path=dataset_path,
        output_dir=options.output_dir,
        generate=generate,
        write_profiles=write_profiles,
    )
    try:
        return use_case.execute(request)
    except PreflightInfrastructureError as e:
        fail(console, e)


def fail(console: Console, error: PreflightInfrastructureError) -> NoReturn:
    console.print(f"[red]✗ Error:[/red] {escape(str(error))}", highlight=False)
    raise click.exceptions.Exit(FATAL_EXIT_CODE) from error
