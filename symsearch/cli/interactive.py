"""Interactive CLI features for keyboard-driven symbol lookup."""

import typer
from pathlib import Path
from typing import Optional
import logging

from symsearch.cli.commands import configure_logging, load_corpus
from symsearch.cli.config import get_config, get_config_file, init_config, validate_corpus_exists
from symsearch.cli.formatting import format_frame
from symsearch.data_ingestion import CorpusError, load_package_data
from symsearch.session import KeyCommand, RenderFrame, SearchSession

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {":q", ":quit"}

# Line commands mapped onto the session's key vocabulary
LINE_KEYS = {
    ":down": "ArrowDown",
    ":j": "ArrowDown",
    ":up": "ArrowUp",
    ":k": "ArrowUp",
    ":enter": "Enter",
    ":open": "Enter",
    ":esc": "Escape",
}


class InteractiveShell:
    """Line-driven front end for a SearchSession.

    Plain lines are query input; lines starting with ':' are keys.
    """

    def __init__(self, session: SearchSession):
        self.session = session
        self.target: Optional[str] = None
        session.sink = self.paint

    def paint(self, frame: RenderFrame) -> None:
        if self.target is not None:
            return
        typer.echo(format_frame(frame, self.session.results.items or None))

    def handle(self, line: str) -> bool:
        """Process one line. Returns False when the loop should stop."""
        command = line.strip()
        if command in QUIT_COMMANDS:
            return False

        if command.startswith(":"):
            key = LINE_KEYS.get(command)
            if key is None:
                typer.echo(f"⚠️  Unknown command '{command}' (use :up, :down, :enter, :esc, :q)")
                return True
            selected = self.session.selected()
            if key == "Enter" and selected is not None:
                # Suppress the repaint of the cleared results
                self.target = selected.entity.link
            outcome = self.session.key(key)
            if outcome.target:
                typer.echo(f"➜ {outcome.target}")
                return False
            if outcome.command is KeyCommand.ACTIVATE:
                typer.echo("⚠️  Nothing selected")
            return True

        if not self.session.input(line):
            logger.debug("Query unchanged, skipping")
        return True


def interactive(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Initial query"),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Search a single package"),
    inline: bool = typer.Option(False, "--inline", help="Filter the package listing instead of a result list"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum results to display"),
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Package data JSON file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Search interactively and pick a result with the keyboard.

    Type a query to search. Use :down / :up to move the selection,
    :enter to open the selected symbol, :esc to clear the selection
    and :q to quit.

    Example:
        $ symsearch interactive
        $ symsearch interactive --package fmt --query print
    """
    try:
        config = get_config({
            "limit": limit,
            "package": package,
            "corpus_path": corpus,
            "verbose": verbose or None,
        })
        configure_logging(config["verbose"])

        if inline and not config["package"]:
            typer.echo("❌ --inline requires --package", err=True)
            raise typer.Exit(2)

        symbols = load_corpus(config["corpus_path"], config["package"])
        inline_names = symbols.names(config["package"]) if inline else None

        session = SearchSession(symbols, limit=config["limit"], inline_names=inline_names)
        shell = InteractiveShell(session)

        typer.echo(f"🔍 {len(symbols)} symbols loaded. Type a query (:q to quit).")
        if query:
            session.input(query)

        while True:
            try:
                line = typer.prompt(">", default="", show_default=False)
            except typer.Abort:
                break
            if not shell.handle(line):
                break

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)


def config_show() -> None:
    """Show the resolved configuration and the package data it points at.

    Example:
        $ symsearch config-show
    """
    try:
        config = get_config()
        config_file = get_config_file()

        typer.echo("\n⚙️  Current Configuration")
        typer.echo(f"Source: {config_file or 'defaults and environment'}")
        typer.echo(f"{'─' * 60}")

        for key, value in sorted(config.items()):
            typer.echo(f"{key:<20} : {value}")

        typer.echo(f"{'─' * 60}")

        corpus_path = config["corpus_path"]
        if not validate_corpus_exists(corpus_path):
            typer.echo(f"❌ Package data not found at {corpus_path}\n")
            return

        try:
            data = load_package_data(corpus_path)
        except CorpusError as e:
            typer.echo(f"⚠️  Package data at {corpus_path} is unreadable: {e}\n")
            return

        packages = data.get("packages", data)
        typer.echo(f"📦 Package data at {corpus_path}: {len(packages)} packages\n")

    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)


def config_init(
    config_path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Custom config file path"
    ),
    corpus: Optional[str] = typer.Option(
        None, "--corpus", "-c", help="Package data JSON file to record as corpus_path"
    ),
) -> None:
    """Write a configuration file with default settings.

    Uses ~/.symsearch/config.json unless --path is given; a .yaml suffix
    writes YAML.

    Example:
        $ symsearch config-init --corpus ./pkg-data.json
        $ symsearch config-init --path ./symsearch.yaml
    """
    try:
        path = Path(config_path) if config_path else Path.home() / ".symsearch" / "config.json"

        if path.exists() and not typer.confirm(f"File {path} already exists. Overwrite?"):
            typer.echo("❌ Cancelled")
            raise typer.Exit(1)

        values = {"corpus_path": str(Path(corpus).resolve())} if corpus else None
        if not init_config(path, values):
            typer.echo("❌ Failed to initialize configuration")
            raise typer.Exit(1)

        typer.echo(f"✅ Configuration initialized at {path}")
        if corpus and not validate_corpus_exists(values["corpus_path"]):
            typer.echo(f"⚠️  Package data not found at {values['corpus_path']} yet")

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)
