"""Retrieve function resources: whole namespace or explicitly named functions."""

from typing import Sequence
from ..client.base import FunctionClient
from ..contracts.function import FunctionList
from ..utils.logging import get_logger

logger = get_logger("fetch.fetcher")


def fetch_functions(client: FunctionClient, namespace: str, names: Sequence[str] = ()) -> FunctionList:
    """
    Fetch functions from the cluster.
    
    With no names, lists the whole namespace in one request and keeps the
    server's ordering. Otherwise issues one request per name, in the order
    given; the first failure aborts the fetch and nothing is returned.
    
    Args:
        client: Function resource client
        namespace: Namespace to read from
        names: Explicit function names (optional)
        
    Returns:
        FunctionList of the matching functions
        
    Raises:
        ClientError: Whatever the client raised, unchanged
    """
    if not names:
        logger.debug(f"Listing functions in namespace {namespace}")
        return client.list_functions(namespace)
    
    items = []
    for name in names:
        logger.debug(f"Fetching function {namespace}/{name}")
        items.append(client.get_function(namespace, name))
    return FunctionList(items=items)
