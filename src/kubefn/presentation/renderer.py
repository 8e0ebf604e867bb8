"""Render function lists as tables or structured documents."""

import json
from enum import Enum
from typing import List, Union
import yaml
from tabulate import tabulate
from ..contracts.function import Function, FunctionList
from ..utils.errors import RenderError

TABLE_HEADERS = ["Name", "Namespace", "Handler", "Source", "Runtime", "Type", "Topic", "Dependencies"]
WIDE_HEADERS = TABLE_HEADERS + ["Env", "Memory"]

TABLE_FORMAT = "psql"


class OutputFormat(str, Enum):
    """Supported output formats."""
    TABLE = "table"
    WIDE = "wide"
    JSON = "json"
    YAML = "yaml"


def _cell(value) -> str:
    return "" if value is None else str(value)


def _table_row(function: Function) -> List[str]:
    spec = function.spec
    return [
        _cell(function.metadata.name),
        _cell(function.metadata.namespace),
        _cell(spec.handler),
        _cell(spec.function),
        _cell(spec.runtime),
        _cell(spec.type),
        _cell(spec.topic),
        _cell(spec.deps),
    ]


def _env_cell(function: Function) -> str:
    container = function.first_container()
    if container is None:
        return ""
    return ", ".join(f"{env.name} = {_cell(env.value)}" for env in container.env)


def _memory_cell(function: Function) -> str:
    container = function.first_container()
    if container is None:
        return ""
    return _cell(container.resources.memory())


def _wide_row(function: Function) -> List[str]:
    return _table_row(function) + [_env_cell(function), _memory_cell(function)]


def _tabulate(rows: List[List[str]], headers: List[str]) -> str:
    return tabulate(rows, headers=headers, tablefmt=TABLE_FORMAT, disable_numparse=True)


def render_table(function_list: FunctionList) -> str:
    """One row per function with the fixed identity and spec columns."""
    return _tabulate([_table_row(f) for f in function_list.items], TABLE_HEADERS)


def render_wide(function_list: FunctionList) -> str:
    """Table columns plus environment and memory of the first container."""
    return _tabulate([_wide_row(f) for f in function_list.items], WIDE_HEADERS)


def render_json(function_list: FunctionList) -> str:
    return json.dumps(function_list.to_wire(), indent=2, ensure_ascii=False)


def render_yaml(function_list: FunctionList) -> str:
    text = yaml.safe_dump(
        function_list.to_wire(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True
    )
    return text.rstrip("\n")


_RENDERERS = {
    OutputFormat.TABLE: render_table,
    OutputFormat.WIDE: render_wide,
    OutputFormat.JSON: render_json,
    OutputFormat.YAML: render_yaml,
}


def render(function_list: FunctionList, output_format: Union[OutputFormat, str] = OutputFormat.TABLE) -> str:
    """
    Render a function list in the requested format.

    Args:
        function_list: Functions to render, in display order
        output_format: table, wide, json or yaml

    Returns:
        Rendered text (no trailing newline)

    Raises:
        RenderError: If the output format is not supported
    """
    try:
        fmt = OutputFormat(output_format)
    except ValueError:
        supported = "|".join(f.value for f in OutputFormat)
        raise RenderError(f"Unsupported output format '{output_format}'. Use one of: {supported}")
    return _RENDERERS[fmt](function_list)
