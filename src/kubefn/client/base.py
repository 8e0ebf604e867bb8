"""Abstract interface for function resource clients."""

from abc import ABC, abstractmethod
from ..contracts.function import Function, FunctionList


class FunctionClient(ABC):
    """
    Read-only access to function resources in a cluster.
    
    Implementations raise subclasses of ClientError:
    - TransportError when the server cannot be reached or answers with an error
    - DecodeError when a response cannot be parsed into a function resource
    - NotFoundError when a requested function does not exist
    """
    
    @abstractmethod
    def list_functions(self, namespace: str) -> FunctionList:
        """
        Fetch all functions in a namespace.
        
        Args:
            namespace: Namespace to list
            
        Returns:
            FunctionList in server order
        """
        pass
    
    @abstractmethod
    def get_function(self, namespace: str, name: str) -> Function:
        """
        Fetch a single function by namespace and name.
        
        Args:
            namespace: Namespace of the function
            name: Function name
            
        Returns:
            The function resource
        """
        pass
