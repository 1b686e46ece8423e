# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tsodata import configuration
from tsodata.repository.configuration import CONFIGURATION_REPO
from tsodata.terminal.custom_typer import AliasedTyperGroup
from tsodata.terminal.validate import validate_log_level

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("base_uri", config["base_uri"] or "None")
    table.add_row("default_format", config["default_format"] or "None")
    table.add_row(
        "default_top",
        "None" if config["default_top"] is None else str(config["default_top"]),
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    base_uri: Annotated[
        Optional[str], typer.Option("--base-uri", help="Default service root")
    ] = None,
    remove_base_uri: Annotated[bool, typer.Option("--remove-base-uri")] = False,
    default_format: Annotated[
        Optional[str], typer.Option("--default-format", help="e.g. json, xml, atom")
    ] = None,
    remove_default_format: Annotated[
        bool, typer.Option("--remove-default-format")
    ] = False,
    default_top: Annotated[
        Optional[int], typer.Option("--default-top", min=0)
    ] = None,
    remove_default_top: Annotated[bool, typer.Option("--remove-default-top")] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        base_uri=base_uri,
        remove_base_uri=remove_base_uri,
        default_format=default_format,
        remove_default_format=remove_default_format,
        default_top=default_top,
        remove_default_top=remove_default_top,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    view()
