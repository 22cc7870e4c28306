"""Command line interface for DocIndex."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docindex.config import AppConfig
from docindex.errors import InvalidQueryError, MalformedRecordError
from docindex.index.indexer import Indexer
from docindex.index.search import Searcher
from docindex.index.store import IndexStore
from docindex.utils.text import snippet
from docindex.web.app import app as web_app


console = Console()
app = typer.Typer(help="DocIndex - query documentation search payloads")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_store(payload: Path) -> IndexStore:
    store = IndexStore()
    try:
        Indexer(store).load_path(payload)
    except FileNotFoundError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except MalformedRecordError as exc:
        raise typer.BadParameter(f"Malformed payload: {exc}") from exc
    return store


@app.command()
def search(
    payload: Path = typer.Argument(..., help="Payload file or built docs directory", resolve_path=True),
    term: str = typer.Argument(..., help="Query text"),
    limit: int = typer.Option(AppConfig().default_limit, help="Number of results to display"),
    category: Optional[str] = typer.Option(None, help="Only show records of this category"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Query a search payload."""
    _setup_logging(verbose)
    store = _load_store(payload)
    searcher = Searcher(store)

    try:
        results = searcher.search(term, top_k=limit, category=category)
    except InvalidQueryError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Score")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Location")
    table.add_column("Snippet")

    for result in results:
        table.add_row(
            str(result.score),
            escape(result.title),
            escape(result.category),
            escape(result.location),
            escape(snippet(result.text, max_chars=120)),
        )

    console.print(table)


@app.command()
def show(
    payload: Path = typer.Argument(..., help="Payload file or built docs directory", resolve_path=True),
    category: Optional[str] = typer.Option(None, help="Only list records of this category"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the records of a search payload."""
    _setup_logging(verbose)
    store = _load_store(payload)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Page")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Location")

    for position, record in enumerate(store.records):
        if category is not None and record.category != category:
            continue
        table.add_row(
            str(position),
            escape(record.page),
            escape(record.title),
            escape(record.category),
            escape(record.location),
        )

    console.print(table)
    stats = store.stats()
    categories = ", ".join(f"{name}: {count}" for name, count in stats["categories"].items())
    console.print(
        f"Records: {stats['record_count']}, tokens: {stats['token_count']}"
        + (f" ({categories})" if categories else "")
    )


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    payload: Path = typer.Option(None, "--payload", help="Payload file or built docs directory"),
) -> None:
    """Start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = AppConfig(payload_path=payload if payload is not None else AppConfig().payload_path)
    resolved = config.resolve_payload_path(Path.cwd())
    if not resolved.exists():
        console.print("[yellow]Warning: payload not found, searches will return nothing.[/yellow]")
    web_app.state.config = config

    console.print(f"Starting web interface on http://{host}:{port} (payload: {resolved})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":  # pragma: no cover
    app()
