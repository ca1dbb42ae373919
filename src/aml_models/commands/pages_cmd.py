"""Page commands: inspect saved listing pages and walk continuation chains."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from aml_models import catalog
from aml_models.catalog import ModelEntry
from aml_models.commands._common import FormatOpt, get_manager, read_payload, warn_unknown_enums
from aml_models.core.errors import PagingError, err_console, error_handler
from aml_models.core.paging import Continuable, ItemPager
from aml_models.output.formatter import output

app = typer.Typer(name="pages", help="Inspect paged listings saved as JSON files.")
console = Console()


def _page_entry(name: str) -> ModelEntry:
    entry = catalog.get_model(name)
    if entry.is_union or not issubclass(entry.target, Continuable):
        raise PagingError(f"'{entry.name}' is not a paged listing")
    return entry


@app.command()
@error_handler
def inspect(
    name: Annotated[str, typer.Argument(help="Page model name, e.g. PaginatedComputeResourcesList")],
    source: Annotated[str, typer.Argument(help="JSON file, or - for stdin")] = "-",
    fmt: FormatOpt = None,
) -> None:
    """Show the item count and continuation token of one page."""
    mgr = get_manager()
    fmt = mgr.resolve_format(fmt)
    page = _page_entry(name).decode(read_payload(source))
    output(
        {
            "page": type(page).__name__,
            "items": len(page.page_items()),
            "has_next_page": page.has_next_page,
            "continuation": page.continuation_token(),
        },
        fmt,
        title=type(page).__name__,
        indent=mgr.config.json_indent,
    )


@app.command()
@error_handler
def walk(
    name: Annotated[str, typer.Argument(help="Page model name")],
    sources: Annotated[list[str], typer.Argument(help="Page files in fetch order")],
    show_items: Annotated[bool, typer.Option("--items", help="Print every item instead of a page summary")] = False,
    fmt: FormatOpt = None,
) -> None:
    """Follow a continuation chain across saved pages.

    The first file answers the initial request; each following file answers
    the continuation token of the page before it. The chain must end exactly
    at the last file.
    """
    mgr = get_manager()
    fmt = mgr.resolve_format(fmt)
    entry = _page_entry(name)
    remaining = list(sources)
    tokens: list[str | None] = []

    def fetch(token: str | None) -> str:
        if not remaining:
            raise PagingError(f"Listing continues at '{token}' but no page files are left")
        tokens.append(token)
        return read_payload(remaining.pop(0))

    def warn_leftovers() -> None:
        if remaining:
            err_console.print(f"[yellow]Warning:[/] listing ended before {len(remaining)} remaining file(s)")

    pager = ItemPager(fetch, entry.target)
    if show_items:
        items = list(pager)
        warn_leftovers()
        if mgr.config.warn_unknown_enums:
            warn_unknown_enums(items)
        output(items, fmt, indent=mgr.config.json_indent)
        return

    pages = list(pager.by_page())
    warn_leftovers()
    data = [
        {
            "page": index + 1,
            "requested_with": token,
            "items": len(page.page_items()),
            "next_link": page.continuation_token(),
        }
        for index, (page, token) in enumerate(zip(pages, tokens))
    ]
    rows = [[d["page"], d["requested_with"] or "(first)", d["items"], d["next_link"]] for d in data]
    output(data, fmt, columns=["Page", "Requested with", "Items", "Next link"], rows=rows, title=entry.name)
    if fmt == "table":
        total = sum(d["items"] for d in data)
        console.print(f"{total} item(s) across {len(data)} page(s)")
