"""CLI entry point for symsearch.

This module provides the main CLI interface using Typer framework.
Supports one-shot and interactive fuzzy symbol search.
"""

import typer
from typing import Annotated, Optional
from symsearch import __version__
from symsearch.cli.commands import search
from symsearch.cli.interactive import interactive, config_show, config_init


def version_callback(value: bool) -> None:
    """Display version information and exit.

    Args:
        value: Whether version flag was set

    Raises:
        typer.Exit: Always exits after displaying version
    """
    if value:
        typer.echo(f"symsearch version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    help="Fuzzy symbol search over package documentation data",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True,
                     help="Show version and exit")
    ] = None,
) -> None:
    """Fuzzy symbol search over package documentation data."""
    pass

# Register all commands as subcommands
app.command(name="search")(search)
app.command(name="interactive")(interactive)
app.command(name="config-show")(config_show)
app.command(name="config-init")(config_init)


def run() -> None:
    """Entry point function for CLI."""
    app()


if __name__ == "__main__":
    run()
