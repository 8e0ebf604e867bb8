"""CLI utilities package."""

from typing import Optional
from ...client.base import FunctionClient
from ...client.rest import HttpFunctionClient
from ...client.static import StaticFunctionClient
from ...config import ClusterSettings
from ...ingest.loader import load_function_list
from ...utils.errors import KubefnError, TransportError, NotFoundError
from ...utils.logging import get_logger

logger = get_logger("cli.utils")


def build_client(settings: ClusterSettings, from_file: Optional[str] = None) -> FunctionClient:
    """
    Build the function client for a CLI run.
    
    Args:
        settings: Resolved cluster settings
        from_file: Optional JSON/YAML dump to serve functions from instead of the cluster
        
    Returns:
        FunctionClient instance
    """
    if from_file:
        logger.info(f"Serving functions from dump: {from_file}")
        return StaticFunctionClient(load_function_list(from_file))
    
    logger.info(f"Using API server {settings.api_server}{settings.api_path}")
    return HttpFunctionClient(
        api_server=settings.api_server,
        api_path=settings.api_path,
        timeout=settings.timeout
    )


def suggestion_for(error: KubefnError) -> Optional[str]:
    """Return a hint for common failures, if any."""
    if isinstance(error, TransportError) and error.status_code is None:
        return "Check --server (or KUBEFN_API_SERVER) and that `kubectl proxy` is running."
    if isinstance(error, NotFoundError) and error.name is not None:
        return f"Run 'kubefn ls -n {error.namespace}' to see available functions."
    return None


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


__all__ = ["build_client", "format_error", "suggestion_for"]
