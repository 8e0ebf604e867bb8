"""Main CLI entry point for kubefn."""

import click
from .commands.list import list_command
from .commands.version import version as version_command
from ..utils.logging import setup_logging, get_logger
from .. import __version__

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="kubefn", message="%(prog)s version %(version)s")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Log verbosity (default: $KUBEFN_LOG_LEVEL or WARNING)')
def cli(log_level):
    """kubefn - Inspect functions deployed to the cluster."""
    if log_level:
        setup_logging(level=log_level)


cli.add_command(list_command, name="ls")
cli.add_command(list_command, name="list")
cli.add_command(version_command)
