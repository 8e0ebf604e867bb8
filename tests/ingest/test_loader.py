"""Tests for function dump loading."""

import json
import pytest
from kubefn.ingest.loader import load_function_list, parse_function_list
from kubefn.presentation.renderer import render
from kubefn.utils.errors import FunctionLoadError


class TestLoadFunctionList:
    """Test loading -o json / -o yaml dumps."""
    
    @pytest.mark.parametrize("output_format", ["json", "yaml"])
    def test_load_rendered_dump(self, tmp_path, function_list, output_format):
        """Test that rendered dumps load back unchanged."""
        dump = tmp_path / f"functions.{output_format}"
        dump.write_text(render(function_list, output_format), encoding="utf-8")
        
        assert load_function_list(str(dump)) == function_list
    
    def test_load_single_function(self, tmp_path):
        """Test a file holding one function document."""
        dump = tmp_path / "foo.json"
        dump.write_text(json.dumps({"metadata": {"name": "foo", "namespace": "myns"}}), encoding="utf-8")
        
        assert load_function_list(str(dump)).names() == ["foo"]
    
    def test_load_bare_list(self, tmp_path):
        """Test a file holding a list of function documents."""
        dump = tmp_path / "functions.yaml"
        dump.write_text("- metadata: {name: a}\n- metadata: {name: b}\n", encoding="utf-8")
        
        assert load_function_list(str(dump)).names() == ["a", "b"]
    
    def test_load_empty_file(self, tmp_path):
        """Test that an empty file is an empty list."""
        dump = tmp_path / "empty.yaml"
        dump.write_text("", encoding="utf-8")
        
        assert load_function_list(str(dump)).items == []
    
    def test_load_missing_file(self):
        """Test loading non-existent file raises error."""
        with pytest.raises(FunctionLoadError, match="Function dump not found"):
            load_function_list("nonexistent.json")
    
    def test_load_directory(self, tmp_path):
        """Test that a directory is rejected."""
        with pytest.raises(FunctionLoadError, match="Path is not a file"):
            load_function_list(str(tmp_path))
    
    def test_load_invalid_syntax(self, tmp_path):
        """Test loading malformed JSON/YAML raises error."""
        dump = tmp_path / "bad.json"
        dump.write_text("{invalid: [", encoding="utf-8")
        
        with pytest.raises(FunctionLoadError, match="Invalid JSON/YAML"):
            load_function_list(str(dump))
    
    def test_load_wrong_structure(self, tmp_path):
        """Test that a document that is not a function list is rejected."""
        dump = tmp_path / "wrong.json"
        dump.write_text(json.dumps({"items": [{"spec": {}}]}), encoding="utf-8")
        
        with pytest.raises(FunctionLoadError, match="Invalid function list"):
            load_function_list(str(dump))


class TestParseFunctionList:
    """Test validation of decoded data."""
    
    def test_scalar_rejected(self):
        """Test that scalars are not function lists."""
        with pytest.raises(FunctionLoadError, match="does not contain a function list"):
            parse_function_list("just a string")
