"""Model commands: list, describe, and decode wire payloads."""

from __future__ import annotations

from typing import Annotated

import typer

from aml_models import catalog
from aml_models.commands._common import DomainOpt, FormatOpt, get_manager, read_payload, warn_unknown_enums
from aml_models.core.errors import error_handler
from aml_models.core.inspect import describe_fields
from aml_models.output.formatter import output

app = typer.Typer(name="models", help="Browse models and decode payloads against them.")


@app.command("list")
@error_handler
def list_models(
    domain: DomainOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List models and tagged unions."""
    fmt = get_manager().resolve_format(fmt)
    entries = catalog.list_models(domain)
    data = [{"name": e.name, "domain": e.domain, "kind": "union" if e.is_union else "model"} for e in entries]
    rows = [[d["name"], d["domain"], d["kind"]] for d in data]
    output(data, fmt, columns=["Name", "Domain", "Kind"], rows=rows, title="Models")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Model or union name")],
    fmt: FormatOpt = None,
) -> None:
    """Show the wire fields of a model, or the variants of a union."""
    fmt = get_manager().resolve_format(fmt)
    entry = catalog.get_model(name)
    if entry.is_union:
        variants = entry.variants()
        rows = [[v.tag or "(other)", v.model.__name__] for v in variants]
        output(
            [{"tag": v.tag, "model": v.model.__name__} for v in variants],
            fmt,
            columns=["Tag", "Model"],
            rows=rows,
            title=f"{entry.name} ({entry.domain})",
        )
        return

    fields = describe_fields(entry.target)
    rows = [[f.wire_key, f.attribute, f.type, "yes" if f.required else ""] for f in fields]
    output(
        [f._asdict() for f in fields],
        fmt,
        columns=["Wire key", "Attribute", "Type", "Required"],
        rows=rows,
        title=f"{entry.name} ({entry.domain})",
    )


@app.command()
@error_handler
def decode(
    name: Annotated[str, typer.Argument(help="Model or union name")],
    source: Annotated[str, typer.Argument(help="JSON file, or - for stdin")] = "-",
    no_warn: Annotated[bool, typer.Option("--no-warn", help="Do not report undocumented enum values")] = False,
    fmt: FormatOpt = None,
) -> None:
    """Decode a payload and print its canonical wire form."""
    mgr = get_manager()
    fmt = mgr.resolve_format(fmt)
    entry = catalog.get_model(name)
    value = entry.decode(read_payload(source))
    if mgr.config.warn_unknown_enums and not no_warn:
        warn_unknown_enums(value)
    output(value, fmt, title=type(value).__name__, indent=mgr.config.json_indent)
