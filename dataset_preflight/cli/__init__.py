import click

from .. import __version__
from .commands.generate import generate_command
from .commands.report import report_command
from .commands.scan import scan_command


@click.group()
@click.version_option(__version__, "-V", "--version", prog_name="dataset-preflight")
def app() -> None:
    """Lint a dataset directory for publication readiness."""


app.add_command(scan_command, name="scan")
app.add_command(generate_command, name="generate")
app.add_command(report_command, name="report")
__all__ = ["app"]
