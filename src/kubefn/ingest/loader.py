"""Load function lists previously dumped with ``-o json`` or ``-o yaml``."""

from pathlib import Path
from typing import Any
import yaml
from pydantic import ValidationError
from ..contracts.function import FunctionList
from ..utils.errors import FunctionLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.loader")


def load_function_list(path: str) -> FunctionList:
    """
    Load a JSON or YAML function dump.
    
    Accepts a FunctionList document, a single Function document or a bare
    list of Function documents. JSON is parsed by the YAML loader.
    
    Args:
        path: Path to the dump file
        
    Returns:
        FunctionList with the functions in file order
        
    Raises:
        FunctionLoadError: If the file cannot be read or is not a function dump
    """
    dump_path = Path(path)
    
    if not dump_path.exists():
        raise FunctionLoadError(f"Function dump not found: {path}")
    
    if not dump_path.is_file():
        raise FunctionLoadError(f"Path is not a file: {path}")
    
    try:
        with open(dump_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FunctionLoadError(f"Invalid JSON/YAML in {path}: {e}")
    except OSError as e:
        raise FunctionLoadError(f"Error reading {path}: {e}")
    
    function_list = parse_function_list(data, source=str(path))
    logger.info(f"Loaded {len(function_list.items)} function(s) from {path}")
    return function_list


def parse_function_list(data: Any, source: str = "input") -> FunctionList:
    """Validate already decoded data as a FunctionList."""
    if data is None:
        return FunctionList()
    
    if isinstance(data, list):
        data = {"items": data}
    elif isinstance(data, dict) and "items" not in data and "metadata" in data:
        data = {"items": [data]}
    
    if not isinstance(data, dict):
        raise FunctionLoadError(f"{source} does not contain a function list")
    
    try:
        return FunctionList.model_validate(data)
    except ValidationError as e:
        raise FunctionLoadError(f"Invalid function list in {source}: {e}")
