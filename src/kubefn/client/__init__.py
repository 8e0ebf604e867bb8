"""Function resource clients."""

from .base import FunctionClient
from .rest import HttpFunctionClient
from .static import StaticFunctionClient

__all__ = [
    "FunctionClient",
    "HttpFunctionClient",
    "StaticFunctionClient",
]
