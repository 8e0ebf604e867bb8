"""In-memory client serving functions from an already loaded FunctionList."""

from ..contracts.function import Function, FunctionList
from ..utils.errors import NotFoundError
from .base import FunctionClient


class StaticFunctionClient(FunctionClient):
    """Client answering from a fixed FunctionList (dump files, tests)."""
    
    def __init__(self, functions: FunctionList):
        self.functions = functions
    
    def list_functions(self, namespace: str) -> FunctionList:
        items = [f for f in self.functions.items if f.namespace == namespace]
        return FunctionList(
            api_version=self.functions.api_version,
            kind=self.functions.kind,
            items=items,
        )
    
    def get_function(self, namespace: str, name: str) -> Function:
        for function in self.functions.items:
            if function.namespace == namespace and function.name == name:
                return function
        raise NotFoundError(namespace, name)
