# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tsodata.root_logger import configure_logging
from tsodata.terminal import configuration
from tsodata.terminal.custom_typer import AliasedTyperGroup, OrderedOptionsCommand
from tsodata.terminal.query import build

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="TsoData - OData query URLs from the command line",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="build, b", cls=OrderedOptionsCommand)(build)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    TsoData - OData query URLs from the command line

    Global options that apply to all commands.
    """
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
