"""Config commands: view and change CLI settings."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from aml_models.commands._common import FormatOpt, get_manager
from aml_models.core.errors import error_handler
from aml_models.output.formatter import output

app = typer.Typer(name="config", help="View and change CLI settings.")
console = Console()


@app.command()
@error_handler
def show(
    fmt: FormatOpt = None,
) -> None:
    """Show the effective settings."""
    mgr = get_manager()
    fmt = mgr.resolve_format(fmt)
    output(mgr.config.model_dump(), fmt, title=f"Settings: {mgr.config_path}")


@app.command("set")
@error_handler
def set_value(
    key: Annotated[str, typer.Argument(help="Setting name, e.g. default_format")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Change one setting."""
    mgr = get_manager()
    config = mgr.set_value(key, value)
    console.print(f"[green]{key} set to {getattr(config, key)!r}.[/]")


@app.command()
@error_handler
def reset(
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Restore every setting to its default."""
    mgr = get_manager()
    if not force:
        if not Confirm.ask("Reset all settings to their defaults?"):
            console.print("Cancelled.")
            return
    if mgr.reset():
        console.print(f"[green]Removed {mgr.config_path}.[/]")
    else:
        console.print("[yellow]No config file; settings are already at their defaults.[/]")


@app.command()
def path() -> None:
    """Print the config file location."""
    console.print(str(get_manager().config_path), soft_wrap=True)
