"""kubefn - List serverless functions deployed to a cluster."""

from typing import Sequence, Union
from .client.base import FunctionClient
from .fetch.fetcher import fetch_functions
from .presentation.renderer import OutputFormat, render
from .utils.logging import setup_logging, get_logger
from .utils.errors import KubefnError

__version__ = "0.1.0"

__all__ = ["list_functions", "fetch_functions", "render", "OutputFormat"]

setup_logging()
logger = get_logger("core")


def list_functions(
    client: FunctionClient,
    namespace: str,
    names: Sequence[str] = (),
    output: Union[OutputFormat, str] = OutputFormat.TABLE
) -> str:
    """Fetch functions from a namespace and render them in the given format."""
    try:
        function_list = fetch_functions(client, namespace, names)
        logger.info(f"Fetched {len(function_list.items)} function(s) from namespace {namespace}")
        return render(function_list, output)
    except KubefnError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error while listing functions: {e}", exc_info=True)
        raise KubefnError(f"Listing functions failed: {e}") from e
