"""Command line interface for StaticSearch."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from staticsearch.config import AppConfig, SearchConfig
from staticsearch.data.loader import DatasetLoader
from staticsearch.data.store import MemorySessionStore
from staticsearch.errors import DataUnavailable
from staticsearch.render import render_outcome
from staticsearch.search.engine import SearchEngine
from staticsearch.web.app import app as web_app


console = Console()
app = typer.Typer(help="StaticSearch - filter and highlight a JSON dataset")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _to_rich(value: str, config: SearchConfig) -> Text:
    """Turn marker-delimited text into a rich Text with highlighted spans."""
    text = Text()
    marked = re.compile(
        f"{re.escape(config.marker_start)}(.*?){re.escape(config.marker_end)}", re.DOTALL
    )
    position = 0
    for match in marked.finditer(value):
        text.append(value[position : match.start()])
        text.append(match.group(1), style="bold black on yellow")
        position = match.end()
    text.append(value[position:])
    return text


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text (may be empty)"),
    data: Optional[str] = typer.Option(None, "--data", help="Dataset URL or JSON file path"),
    highlight: bool = typer.Option(True, "--highlight/--no-highlight", help="Mark matched keywords"),
    pattern_mode: bool = typer.Option(
        False, "--pattern-mode", help="Treat the query as a regular expression (legacy behaviour)"
    ),
    as_html: bool = typer.Option(False, "--html", help="Print the rendered HTML result list"),
    template: str = typer.Option(SearchConfig().result_template, help="Per-result HTML template"),
    timeout: float = typer.Option(AppConfig().timeout, help="Fetch timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search the dataset for records containing QUERY."""
    _setup_logging(verbose)
    search_config = SearchConfig(
        highlight_keywords=highlight,
        query_literal_mode=not pattern_mode,
        result_template=template,
    )
    config = AppConfig(data_source=data, timeout=timeout, search=search_config)
    source = config.resolve_data_source(Path.cwd())

    loader = DatasetLoader(
        source, MemorySessionStore(), cache_key=config.cache_key, timeout=config.timeout
    )
    try:
        dataset = loader.load()
    except DataUnavailable as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    outcome = SearchEngine(search_config).search(dataset, query)
    for problem in outcome.diagnostics:
        console.print(f"[yellow]Warning: {escape(str(problem))}[/yellow]", highlight=False)

    if as_html:
        console.print(render_outcome(outcome, search_config), markup=False, highlight=False, soft_wrap=True)
        return

    if not outcome.annotated:
        console.print(f"[yellow]{escape(search_config.no_results_message)}[/yellow]")
        return

    columns = list(dict.fromkeys(name for record in outcome.annotated for name in record))
    table = Table(show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column)
    for record in outcome.annotated:
        table.add_row(*(_to_rich(record.get(column, ""), search_config) for column in columns))

    console.print(table)
    console.print(f"{outcome.count} of {len(dataset)} records matched.")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    data: Optional[str] = typer.Option(None, "--data", help="Dataset URL or JSON file path"),
) -> None:
    """Start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = AppConfig(data_source=data)
    source = config.resolve_data_source(Path.cwd())
    web_app.state.config = config
    web_app.state.loader = None

    console.print(f"Starting web interface on http://{host}:{port} (data: {source})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


def main() -> None:  # pragma: no cover - entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
