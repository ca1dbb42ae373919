"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.table import Table


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for index, col in enumerate(columns):
        table.add_column(col, style="bold cyan" if index == 0 else None, no_wrap=index == 0)
    for row in rows:
        table.add_row(*(_cell(cell) for cell in row))
    return table


def flatten_paths(data: Any, prefix: str = "") -> dict[str, Any]:
    """Collapse nested wire data into ``a.b[0].c``-style keys."""
    flat: dict[str, Any] = {}
    if isinstance(data, dict) and data:
        for key, value in data.items():
            flat.update(flatten_paths(value, f"{prefix}.{key}" if prefix else str(key)))
    elif isinstance(data, list) and data:
        for index, value in enumerate(data):
            flat.update(flatten_paths(value, f"{prefix}[{index}]"))
    else:
        flat[prefix] = data
    return flat


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a (possibly nested) dict as a two-column path/value table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in flatten_paths(data).items():
        table.add_row(key, _cell(value))
    return table
