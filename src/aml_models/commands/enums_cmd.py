"""Enum commands: list documented values and decode wire strings."""

from __future__ import annotations

from typing import Annotated

import typer

from aml_models import catalog
from aml_models.commands._common import DomainOpt, FormatOpt, get_manager
from aml_models.core.errors import error_handler
from aml_models.output.formatter import output

app = typer.Typer(name="enums", help="Browse open enums and decode their values.")


def _default_value(enum: type) -> str | None:
    try:
        return enum.default().value
    except TypeError:
        return None


@app.command("list")
@error_handler
def list_enums(
    domain: DomainOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List open enums."""
    fmt = get_manager().resolve_format(fmt)
    entries = catalog.list_enums(domain)
    data = [
        {
            "name": e.name,
            "domain": e.domain,
            "values": len(e.enum.known_values()),
            "default": _default_value(e.enum),
        }
        for e in entries
    ]
    rows = [[d["name"], d["domain"], d["values"], d["default"]] for d in data]
    output(data, fmt, columns=["Name", "Domain", "Values", "Default"], rows=rows, title="Enums")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Enum name")],
    fmt: FormatOpt = None,
) -> None:
    """Show the documented values of an enum."""
    fmt = get_manager().resolve_format(fmt)
    entry = catalog.get_enum(name)
    default = _default_value(entry.enum)
    data = [{"member": m.name, "value": m.value, "default": m.value == default} for m in entry.enum]
    rows = [[d["member"], d["value"], "*" if d["default"] else ""] for d in data]
    output(
        data,
        fmt,
        columns=["Member", "Wire value", "Default"],
        rows=rows,
        title=f"{entry.name} ({entry.domain})",
    )


@app.command()
@error_handler
def decode(
    name: Annotated[str, typer.Argument(help="Enum name")],
    value: Annotated[str, typer.Argument(help="Wire string to decode")],
    fmt: FormatOpt = None,
) -> None:
    """Decode a wire string; undocumented strings are kept, never rejected."""
    fmt = get_manager().resolve_format(fmt)
    entry = catalog.get_enum(name)
    member = entry.enum(value)
    output(
        {"enum": entry.name, "member": member.name, "value": member.value, "known": member.is_known},
        fmt,
        title=entry.name,
    )
