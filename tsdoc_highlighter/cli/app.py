"""
CLI entry point - built with Typer

Commands:
1. show    - highlight the doc comments of one file
2. scan    - span statistics for a directory tree
3. watch   - re-render a file whenever it changes
4. flavors - list the Catppuccin flavors
5. tags    - print the tag classification table
"""

import logging
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from tsdoc_highlighter.config import ConfigError, HighlightConfig, load_config
from tsdoc_highlighter.core import (
    TAG_TABLES,
    Category,
    SourceText,
    parse_document,
    read_source_file,
    scan_files,
)
from tsdoc_highlighter.render import PALETTES, STYLE_TABLE, Highlighter
from tsdoc_highlighter.reporters import JsonReporter, RichReporter
from tsdoc_highlighter.scheduler import DEFAULT_DELAY, Debouncer

app = typer.Typer(
    name="tsdoc-highlighter",
    help="Catppuccin highlighting for /** ... */ documentation comments.",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def resolve_config(
    config_path: Optional[Path],
    start: Path,
    **overrides,
) -> HighlightConfig:
    """File configuration with command line overrides applied."""
    try:
        return load_config(config_path, start=start).merged(**overrides)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def read_source(path: Path) -> SourceText:
    if not path.exists():
        console.print(f"[red]Error:[/red] Path does not exist: {path}")
        raise typer.Exit(1)
    if not path.is_file():
        console.print(f"[red]Error:[/red] Path is not a file: {path}")
        raise typer.Exit(1)
    try:
        return read_source_file(path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Failed to read {path}: {e}")
        raise typer.Exit(1)


@app.command()
def show(
    file: Path = typer.Argument(..., help="Source file to highlight"),
    flavor: Optional[str] = typer.Option(None, "--flavor", "-F", help="mocha, macchiato, frappe or latte"),
    bold: Optional[bool] = typer.Option(None, "--bold/--no-bold", help="Bold tag styles"),
    italic: Optional[bool] = typer.Option(None, "--italic/--no-italic", help="Italic description styles"),
    opacity: Optional[float] = typer.Option(None, "--opacity", help="Foreground opacity, 0 to 1"),
    format: str = typer.Option("rich", "--format", "-f", help="Output format: rich (default) or json"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Highlight every doc comment of a file.

    Examples:
        tsdoc-highlighter show src/index.ts
        tsdoc-highlighter show src/index.ts --flavor latte --no-italic
        tsdoc-highlighter show src/index.ts --format json
    """
    setup_logging(verbose)
    source = read_source(file)
    result = parse_document(source)

    if format == "json":
        JsonReporter().report(source, result, str(file))
        return

    config = resolve_config(
        config_path,
        file.resolve().parent,
        flavor=flavor,
        enable_bold_tags=bold,
        enable_italic_descriptions=italic,
        opacity=opacity,
    )
    RichReporter(console, Highlighter(config)).report(source, result, str(file))


@app.command()
def scan(
    target: Path = typer.Argument(Path("."), help="Directory to scan"),
    ext: Optional[list[str]] = typer.Option(None, "--ext", "-e", help="File extension to include (repeatable)"),
    format: str = typer.Option("rich", "--format", "-f", help="Output format: rich (default) or json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List files as they are parsed"),
) -> None:
    """
    Count doc comment spans per file under a directory.

    Examples:
        tsdoc-highlighter scan
        tsdoc-highlighter scan ./src --ext .ts --ext .tsx
    """
    setup_logging(verbose)
    root = target.resolve()
    if not root.exists():
        console.print(f"[red]Error:[/red] Path does not exist: {target}")
        raise typer.Exit(1)
    if not root.is_dir():
        console.print(f"[red]Error:[/red] Path is not a directory: {target}")
        raise typer.Exit(1)

    extensions = None
    if ext:
        extensions = frozenset(e.lower() if e.startswith(".") else f".{e.lower()}" for e in ext)

    on_file = None
    if verbose:
        def on_file(rel_path: str) -> None:
            console.print(f"[dim]  {rel_path}[/dim]")

    report = scan_files(root, extensions=extensions, on_file=on_file)

    if format == "json":
        JsonReporter().report_scan(report)
    else:
        RichReporter(console).report_scan(report)


@app.command()
def watch(
    file: Path = typer.Argument(..., help="Source file to watch"),
    delay: float = typer.Option(DEFAULT_DELAY, "--delay", help="Debounce delay in seconds"),
    interval: float = typer.Option(0.2, "--interval", help="Polling interval in seconds"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
) -> None:
    """
    Re-render a file's doc comments whenever it changes (Ctrl+C to stop).

    The configuration file is re-read on every change.
    """
    setup_logging(False)
    read_source(file)
    highlighter = Highlighter(resolve_config(config_path, file.resolve().parent))

    def render() -> None:
        try:
            source = read_source_file(file)
            highlighter.reload(load_config(config_path, start=file.resolve().parent))
        except (OSError, UnicodeDecodeError, ConfigError) as e:
            console.print(f"[red]Error:[/red] {e}")
            return
        console.clear()
        RichReporter(console, highlighter).report(source, parse_document(source), str(file))

    debouncer = Debouncer(render, delay)
    debouncer.trigger()
    last_mtime = file.stat().st_mtime
    try:
        while True:
            time.sleep(interval)
            try:
                mtime = file.stat().st_mtime
            except OSError:
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                debouncer.trigger()
    except KeyboardInterrupt:
        debouncer.cancel()


@app.command()
def flavors() -> None:
    """List the available Catppuccin flavors."""
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Flavor", style="bold")
    table.add_column("Description")
    table.add_column("Swatch")

    for palette in PALETTES.values():
        swatch = Text()
        for category in (Category.TAG, Category.PARAM_NAME, Category.TYPE, Category.LINK, Category.RETURNS):
            swatch.append("██", style=getattr(palette, STYLE_TABLE[category][0]))
        table.add_row(palette.name, palette.label, swatch)

    console.print(table)
    console.print("[dim]Select one with --flavor or `flavor = \"...\"` in .tsdoc-highlighter.toml[/dim]")


@app.command()
def tags() -> None:
    """Show how tag tokens are classified, in precedence order."""
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Kind", style="bold")
    table.add_column("Category")
    table.add_column("Tags")

    for kind, tag_set, category in TAG_TABLES:
        table.add_row(kind, category.value, ", ".join(sorted(tag_set)))
    table.add_row("unknown", Category.TAG.value, "[dim]any other @word[/dim]")

    console.print(table)


@app.command()
def version() -> None:
    """Show the version of tsdoc-highlighter."""
    from tsdoc_highlighter import __version__
    console.print(f"[bold]tsdoc-highlighter[/bold] v{__version__}")


if __name__ == "__main__":
    app()
