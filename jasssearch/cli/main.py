"""CLI entry point for jasssearch.

This module provides the main CLI interface using Typer framework.
Supports interactive fuzzy search over the jassdoc API declarations.
"""

import logging

import typer
from typing import Annotated, Optional
from rich.logging import RichHandler

from jasssearch import __version__
from jasssearch.cli.config import get_config
from jasssearch.cli.commands import (
    search, list_functions, detail, config_show, config_init
)


def version_callback(value: bool) -> None:
    """Display version information and exit.

    Args:
        value: Whether version flag was set

    Raises:
        typer.Exit: Always exits after displaying version
    """
    if value:
        typer.echo(f"jass-search version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records through Rich, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app = typer.Typer(
    help="Fuzzy search tool for the documented JASS API",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True,
                     help="Show version and exit")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Fuzzy search over the documented JASS natives."""
    configure_logging(verbose or bool(get_config().get("verbose")))


app.command(name="search")(search)
app.command(name="list-functions")(list_functions)
app.command(name="detail")(detail)
app.command(name="config-show")(config_show)
app.command(name="config-init")(config_init)


def run() -> None:
    """Entry point function for CLI."""
    app()


if __name__ == "__main__":
    run()
