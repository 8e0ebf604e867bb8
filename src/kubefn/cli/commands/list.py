"""List command - show functions deployed to a namespace."""

import sys
from pathlib import Path
import click
from ... import list_functions
from ...config import resolve_settings
from ...presentation.renderer import OutputFormat
from ...utils.errors import KubefnError
from ...utils.logging import get_logger
from ..utils import build_client, format_error, suggestion_for

logger = get_logger("cli.list")


@click.command()
@click.argument('names', nargs=-1)
@click.option('--namespace', '-n', default=None, help='Namespace of the functions (default: config or "default")')
@click.option('--out', '-o', 'output_format', type=click.Choice([f.value for f in OutputFormat]),
              default=None, help='Output format (default: config or "table")')
@click.option('--server', default=None, help='API server URL, e.g. http://localhost:8001')
@click.option('--timeout', type=float, default=None, help='Request timeout in seconds')
@click.option('--from-file', type=click.Path(), default=None,
              help='List functions from a JSON/YAML dump instead of the cluster')
@click.option('--output-file', type=click.Path(), default=None, help='Save output to file')
def list_command(names, namespace, output_format, server, timeout, from_file, output_file):
    """
    List functions deployed to the cluster.
    
    With no NAMES, lists every function in the namespace. With NAMES, fetches
    exactly those functions and fails if any of them does not exist.
    """
    try:
        settings = resolve_settings({
            "namespace": namespace,
            "output": output_format,
            "api_server": server,
            "timeout": timeout,
        })
        client = build_client(settings, from_file)
        output_text = list_functions(client, settings.namespace, list(names), settings.output)
        
        if output_file:
            output_path = Path(output_file)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(output_text + "\n")
        else:
            click.echo(output_text)
        
    except KubefnError as e:
        click.echo(format_error(str(e), suggestion_for(e)), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(format_error(f"Could not write output: {e}"), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Listing functions failed: {e}"), err=True)
        sys.exit(1)
