"""Custom exception classes for kubefn."""

from typing import Optional


class KubefnError(Exception):
    """Base exception for all kubefn errors."""
    pass


class ClientError(KubefnError):
    """Base class for failures raised by a function resource client."""
    pass


class TransportError(ClientError):
    """Raised when the API server cannot be reached or answers with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ClientError):
    """Raised when a response body cannot be parsed into a function resource."""
    pass


class NotFoundError(ClientError):
    """Raised when an explicitly requested function does not exist."""

    def __init__(self, namespace: str, name: Optional[str] = None):
        if name is None:
            message = f"No functions resource found in namespace '{namespace}'"
        else:
            message = f"Function '{name}' not found in namespace '{namespace}'"
        super().__init__(message)
        self.namespace = namespace
        self.name = name


class RenderError(KubefnError):
    """Raised when output cannot be rendered in the requested format."""
    pass


class FunctionLoadError(KubefnError):
    """Raised when a function list dump cannot be loaded or is invalid."""
    pass


class ConfigError(KubefnError):
    """Raised when configuration is invalid or missing."""
    pass
