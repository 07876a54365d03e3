"""CLI commands for symsearch.

Core commands for loading package data and searching it.
"""

import logging
from typing import List, Optional

import typer

from symsearch.cli.config import get_config, validate_corpus_exists
from symsearch.cli.formatting import format_results
from symsearch.data_ingestion import Corpus, build_corpus, load_package_data
from symsearch.query import KindFilter, rank, window

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Enable debug logging for --verbose runs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def load_corpus(corpus_path: str, package: Optional[str] = None) -> Corpus:
    """Load package data and build a corpus, exiting with code 2 if it is missing."""
    if not validate_corpus_exists(corpus_path):
        typer.echo(f"❌ Package data not found at {corpus_path}", err=True)
        typer.echo("Set SYMSEARCH_CORPUS or pass --corpus to point at a package data file", err=True)
        raise typer.Exit(2)

    data = load_package_data(corpus_path)
    return build_corpus(data, scope=package)


def search(
    query: str = typer.Argument(..., help="Fuzzy symbol query, e.g. 'fmtpf'"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum results to return"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format (table or json)"),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Search a single package"),
    kind: Optional[List[str]] = typer.Option(None, "--kind", "-k", help="Only entities of this kind"),
    corpus: Optional[str] = typer.Option(None, "--corpus", "-c", help="Package data JSON file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Search symbols with a fuzzy, abbreviated query.

    Example:
        $ symsearch search fmtpf
        $ symsearch search alloc --package mem --limit 5
    """
    try:
        config = get_config({
            "limit": limit,
            "output": output,
            "package": package,
            "corpus_path": corpus,
            "verbose": verbose or None,
        })
        configure_logging(config["verbose"])

        symbols = load_corpus(config["corpus_path"], config["package"])
        filters = [KindFilter(kind)] if kind else None

        query = query.strip()
        if not query:
            typer.echo("❌ No results found")
            raise typer.Exit(0)

        results = window(rank(symbols.entities, query, filters), config["limit"])

        if not results:
            typer.echo("❌ No results found")
            raise typer.Exit(0)

        if config["output"] != "json":
            typer.echo(f"✅ Found {results.results_found} results, showing {results.results_shown}\n")
        typer.echo(format_results(results.items, config["output"]))

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1) from None
