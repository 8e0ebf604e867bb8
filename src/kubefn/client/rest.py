"""REST client for function resources served by the cluster API server."""

from typing import Optional, Type, TypeVar
import requests
from pydantic import BaseModel, ValidationError
from ..contracts.function import Function, FunctionList
from ..utils.errors import DecodeError, NotFoundError, TransportError
from ..utils.logging import get_logger
from .base import FunctionClient

logger = get_logger("client.rest")

DEFAULT_API_PATH = "/apis/k8s.io/v1"
DEFAULT_TIMEOUT = 10.0

T = TypeVar("T", bound=BaseModel)


class HttpFunctionClient(FunctionClient):
    """
    Function client backed by the cluster REST API.
    
    Talks plain HTTP to an API server endpoint that needs no credentials,
    typically ``kubectl proxy`` on http://localhost:8001.
    """
    
    def __init__(
        self,
        api_server: str,
        api_path: str = DEFAULT_API_PATH,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.
        
        Args:
            api_server: API server base URL, e.g. http://localhost:8001
            api_path: Path of the API group/version serving functions
            timeout: Per-request timeout in seconds
            session: Optional requests session (a new one is created if omitted)
        """
        self.api_server = api_server.rstrip("/")
        self.api_path = "/" + api_path.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
    
    def _functions_url(self, namespace: str) -> str:
        return f"{self.api_server}{self.api_path}/namespaces/{namespace}/functions"
    
    def list_functions(self, namespace: str) -> FunctionList:
        url = self._functions_url(namespace)
        return self._get(url, FunctionList, namespace)
    
    def get_function(self, namespace: str, name: str) -> Function:
        url = f"{self._functions_url(namespace)}/{name}"
        return self._get(url, Function, namespace, name)
    
    def _get(self, url: str, model: Type[T], namespace: str, name: Optional[str] = None) -> T:
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"Could not reach API server at {self.api_server}: {e}") from e
        
        if response.status_code == 404:
            logger.warning(f"GET {url} returned 404")
            raise NotFoundError(namespace, name)
        if not 200 <= response.status_code < 300:
            logger.warning(f"GET {url} returned {response.status_code}")
            raise TransportError(
                f"API server returned HTTP {response.status_code} for {url}: {response.text[:200]}",
                status_code=response.status_code
            )
        
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e
        
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Unexpected {model.__name__} structure from {url}: {e}") from e
