"""Output dispatcher: renders data in table, JSON, or YAML format."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from aml_models.config.constants import DEFAULT_JSON_INDENT
from aml_models.output.tables import kv_table, make_table

console = Console()


def to_plain(data: Any) -> Any:
    """Wire models become their wire dicts; anything else passes through."""
    if hasattr(data, "to_wire"):
        return data.to_wire()
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json")
    if isinstance(data, list):
        return [to_plain(item) for item in data]
    return data


def output_json(data: Any, *, indent: int = DEFAULT_JSON_INDENT) -> None:
    """Print data as formatted JSON."""
    console.print_json(json.dumps(to_plain(data), indent=indent, default=str), indent=indent)


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    import yaml

    console.print(yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False), end="")


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Print data as a Rich table."""
    if columns and rows is not None:
        console.print(make_table(title, columns, rows))
        return
    data = to_plain(data)
    if isinstance(data, dict):
        console.print(kv_table(data, title=title))
    else:
        console.print(data)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
    indent: int = DEFAULT_JSON_INDENT,
) -> None:
    """Dispatch output to the appropriate formatter."""
    if fmt == "json":
        output_json(data, indent=indent)
    elif fmt == "yaml":
        output_yaml(data)
    else:
        output_table(data, columns=columns, rows=rows, title=title)
