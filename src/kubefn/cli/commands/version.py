"""Version command - show kubefn version."""

import click
from ... import __version__


@click.command()
def version():
    """Show kubefn version."""
    click.echo(f"kubefn version {__version__}")
