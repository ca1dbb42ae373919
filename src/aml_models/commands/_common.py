"""Shared helpers for CLI commands: options, config access, payload input."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.markup import escape

from aml_models.config.manager import ConfigManager
from aml_models.core.errors import AmlModelsError, err_console
from aml_models.core.inspect import find_unknown_enums

# Shared Typer option type aliases
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format: table, json or yaml"),
]
DomainOpt = Annotated[
    str | None,
    typer.Option("--domain", "-d", help="Only list entries of this domain"),
]


def get_manager() -> ConfigManager:
    return ConfigManager()


def read_payload(source: str) -> str:
    """Read a JSON payload from a file path, or from stdin when *source* is ``-``."""
    if source == "-":
        return typer.get_text_stream("stdin").read()
    path = Path(source)
    if not path.is_file():
        raise AmlModelsError(f"File not found: {source}")
    return path.read_text(encoding="utf-8")


def warn_unknown_enums(value: Any) -> int:
    """Print one warning per undocumented enum value in *value*; returns the count."""
    found = find_unknown_enums(value)
    for item in found:
        where = item.path or "<root>"
        err_console.print(
            f"[yellow]Warning:[/] {escape(where)}: '{escape(item.value)}' is not a documented {item.enum} value"
        )
    return len(found)
