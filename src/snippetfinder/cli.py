"""Command line interface for SnippetFinder."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from snippetfinder.config import DEFAULT_EXTENSIONS, AppConfig, parse_extensions
from snippetfinder.errors import ConfigurationError
from snippetfinder.index.cache import LRUCache
from snippetfinder.index.crawler import make_entry
from snippetfinder.index.indexer import Indexer
from snippetfinder.index.search import filter_index
from snippetfinder.ingestion.loader import FileContentLoader
from snippetfinder.ingestion.preview import PreviewLoader
from snippetfinder.models import Entry, ScanResult
from snippetfinder.utils.files import contract_home_directory
from snippetfinder.utils.text import format_file_size


console = Console()
app = typer.Typer(help="SnippetFinder - lazy search and preview for snippet folders")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_config() -> AppConfig:
    try:
        return AppConfig.from_env()
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_config(
    roots: Sequence[Path],
    extensions: Optional[str],
    lines: Optional[int],
    max_concurrency: Optional[int],
) -> AppConfig:
    """Layer command line options over the environment; unset options keep the environment value."""
    config = _load_config()
    if roots:
        config.folder_path = roots[0]
        config.secondary_folder_paths = [str(root) for root in roots[1:]]
    if extensions is not None:
        config.supported_extensions = parse_extensions(extensions)
        config.priority_extensions = config.supported_extensions
    if lines is not None:
        config.search_index_lines = lines
    if max_concurrency is not None:
        config.max_concurrency = max_concurrency if max_concurrency > 0 else None
    if not config.root_paths():
        raise typer.BadParameter(
            "No snippet folders given. Pass one or more paths or set SNIPPETFINDER_FOLDER."
        )
    return config


def _run_scan(config: AppConfig) -> ScanResult:
    result = Indexer.from_config(config).scan(config.root_paths())
    if result.errors:
        console.print("[red]Error loading snippets.[/red]")
        for error in result.errors:
            console.print(f"  [red]{escape(str(error))}[/red]", soft_wrap=True)
    return result


def _display_folder(entry: Entry) -> str:
    return "" if entry.folder == "." else entry.folder


def _print_entries(entries: Sequence[Entry]) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Folder")
    table.add_column("Size")
    table.add_column("Modified")

    for entry in entries:
        modified = entry.modified.strftime("%Y-%m-%d %H:%M")
        table.add_row(entry.name, _display_folder(entry), format_file_size(entry.file_size), modified)

    console.print(table)


def _entry_for_file(path: Path) -> Entry:
    full_path = Path(os.path.abspath(path))
    try:
        stat = full_path.stat()
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {full_path}: {exc.strerror or exc}") from exc
    return make_entry(full_path.parent, full_path, stat)


ROOTS_ARGUMENT = typer.Argument(None, help="Snippet folders to scan.")
EXT_OPTION = typer.Option(
    None,
    "--ext",
    help=f"Comma-separated accepted extensions, highest priority first [default: SNIPPETFINDER_EXTENSIONS or {DEFAULT_EXTENSIONS}]",
)
LINES_OPTION = typer.Option(
    None, "--lines", help="Leading lines per file used for content search [default: SNIPPETFINDER_SEARCH_LINES or 3]"
)
CONCURRENCY_OPTION = typer.Option(None, "--max-concurrency", help="Cap on concurrent filesystem operations")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command()
def scan(
    roots: Optional[List[Path]] = ROOTS_ARGUMENT,
    ext: Optional[str] = EXT_OPTION,
    lines: Optional[int] = LINES_OPTION,
    max_concurrency: Optional[int] = CONCURRENCY_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Scan snippet folders and list every entry in presentation order."""
    _setup_logging(verbose)
    config = _build_config(roots or [], ext, lines, max_concurrency)
    result = _run_scan(config)
    if not result.entries:
        console.print("[yellow]No snippets found.[/yellow]")
        return
    _print_entries(result.entries)
    console.print(result.summary())


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    roots: Optional[List[Path]] = ROOTS_ARGUMENT,
    folder: Optional[str] = typer.Option(None, "--folder", "-f", help="Only entries in this folder"),
    ext: Optional[str] = EXT_OPTION,
    lines: Optional[int] = LINES_OPTION,
    max_concurrency: Optional[int] = CONCURRENCY_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Search snippet names, folders and leading lines."""
    _setup_logging(verbose)
    config = _build_config(roots or [], ext, lines, max_concurrency)
    result = _run_scan(config)
    matches = filter_index(result.entries, folder, query)
    if not matches:
        console.print("[yellow]No matches found.[/yellow]")
        return
    _print_entries(matches)


@app.command()
def folders(
    roots: Optional[List[Path]] = ROOTS_ARGUMENT,
    ext: Optional[str] = EXT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the folders that contain snippets."""
    _setup_logging(verbose)
    config = _build_config(roots or [], ext, 0, None)
    result = _run_scan(config)
    for name in result.folders:
        console.print(name)


@app.command()
def preview(
    path: Path = typer.Argument(..., help="Snippet file to preview"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the first lines of one snippet without loading the whole file."""
    _setup_logging(verbose)
    config = _load_config()
    entry = _entry_for_file(path)
    try:
        cache: LRUCache[str, str] = LRUCache(config.cache_capacity)
    except ValueError as exc:
        raise typer.BadParameter(f"SNIPPETFINDER_CACHE_SIZE: {exc}") from exc
    loader = PreviewLoader(
        cache,
        max_bytes=config.preview_bytes,
        max_lines=config.preview_lines,
        large_file_bytes=config.large_file_bytes,
    )
    text = loader.preview_sync(entry)
    line_count = len(text.split("\n"))

    heading = entry.name if entry.folder == "." else f"{entry.name} - {entry.folder}"
    console.print(f"[bold]{escape(heading)}[/bold]")
    console.print(f"Path: {escape(contract_home_directory(entry.full_path))}", soft_wrap=True)
    console.print(f"Size: {format_file_size(entry.file_size)}  Lines: {line_count}")
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command()
def show(path: Path = typer.Argument(..., help="Snippet file to print")) -> None:
    """Print the full, paste-ready content of one snippet."""
    entry = _entry_for_file(path)
    try:
        content = FileContentLoader().load_content(entry.full_path)
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {entry.full_path}: {exc.strerror or exc}") from exc
    typer.echo(content)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    from snippetfinder.web.app import app as web_app

    console.print(f"Starting web interface on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
