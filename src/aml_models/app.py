"""Root Typer app: global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from aml_models import __version__
from aml_models.commands import config_cmd, enums_cmd, models_cmd, pages_cmd

app = typer.Typer(
    name="aml-models",
    help="Inspect and validate Azure Machine Learning management API payloads.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"aml-models {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Azure ML model catalog: browse models and enums, decode payloads, walk pages."""


# Register command groups
app.add_typer(models_cmd.app, name="models")
app.add_typer(enums_cmd.app, name="enums")
app.add_typer(pages_cmd.app, name="pages")
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
