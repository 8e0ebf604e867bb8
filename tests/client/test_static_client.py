"""Tests for the in-memory function client."""

import pytest
from kubefn.client.static import StaticFunctionClient
from kubefn.contracts.function import Function, FunctionList, ObjectMeta
from kubefn.utils.errors import NotFoundError


class TestStaticFunctionClient:
    """Test namespace filtering and lookups."""
    
    def test_list_filters_namespace(self, function_list):
        """Test that only functions of the namespace are listed, in order."""
        other = Function(metadata=ObjectMeta(name="baz", namespace="other"))
        client = StaticFunctionClient(FunctionList(items=function_list.items + [other]))
        
        assert client.list_functions("myns").names() == ["foo", "bar"]
        assert client.list_functions("other").names() == ["baz"]
    
    def test_get_function(self, static_client, bar_function):
        """Test lookup by namespace and name."""
        assert static_client.get_function("myns", "bar") == bar_function
    
    def test_get_missing(self, static_client):
        """Test NotFoundError for unknown names or namespaces."""
        with pytest.raises(NotFoundError, match="Function 'nope' not found in namespace 'myns'"):
            static_client.get_function("myns", "nope")
        with pytest.raises(NotFoundError):
            static_client.get_function("other", "foo")
