from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .formatting import display_text, human_size, render_bar
from .scanner import ScanResult, TraversalError, scan
from .settings import Settings, load_settings

app = typer.Typer(
    add_completion=False,
    help="dutui: scan a directory and browse its disk usage",
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _resolve_root(directory: str) -> Path:
    """Canonicalize the DIRECTORY argument or exit with code 1."""
    try:
        return Path(directory).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        err_console.print(
            f"Error resolving path '{display_text(directory)}': {display_text(exc)}",
            markup=False,
            highlight=False,
        )
        raise typer.Exit(code=1)


def _scan_root(root: Path) -> ScanResult:
    """Scan `root`; a failure on the root itself is fatal."""
    try:
        return scan(root)
    except TraversalError as exc:
        err_console.print(
            f"Error traversing directory '{display_text(root)}': {display_text(exc.cause)}",
            markup=False,
            highlight=False,
        )
        raise typer.Exit(code=1)


def _print_skipped(result: ScanResult) -> None:
    if result.skipped:
        err_console.print(
            f"[yellow]⚠ Skipped {len(result.skipped)} unreadable entr"
            f"{'y' if len(result.skipped) == 1 else 'ies'}[/yellow] "
            "[dim](excluded from totals)[/dim]"
        )


def _print_listing(result: ScanResult, bar_width: int) -> None:
    """Print the root's children as a table instead of starting the browser."""
    root = result.root
    entries = root.children or []
    max_size = max((e.size for e in entries), default=1)

    table = Table(title=Text(display_text(root.path), style="bold"), show_header=True)
    table.add_column("Size", justify="right", style="cyan")
    table.add_column("Bar")
    table.add_column("Name", style="bold")

    for entry in entries:
        name = f"{entry.name}/" if entry.is_directory else entry.name
        table.add_row(
            human_size(entry.size),
            Text(f"[{render_bar(entry.size, max_size, bar_width)}]"),
            Text(name),
        )

    console.print(table)
    console.print(
        f"Total: [cyan]{human_size(root.size)}[/cyan]  Items: [cyan]{root.item_count:,}[/cyan]"
    )


def browse(result: ScanResult, settings: Settings) -> None:
    """Run the interactive browser over a finished scan."""
    from .tui import Browser, ConsoleSurface, Navigator

    nav = Navigator(result.root)
    with ConsoleSurface(console) as surface:
        Browser(nav, surface, settings).run()


# ═══════════════════════════════════════════════════════════════════════════════
# COMMAND
# ═══════════════════════════════════════════════════════════════════════════════

@app.command()
def main(
    directory: Annotated[str, typer.Argument(help="Directory to scan")],
    list_only: Annotated[
        bool,
        typer.Option("--list", "-l", help="Print the top-level entries and exit"),
    ] = False,
    bar_width: Annotated[
        Optional[int],
        typer.Option("--bar-width", min=1, help="Bar graph width in cells"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)"),
    ] = None,
):
    """
    [bold]dutui[/bold]: a terminal disk usage browser.

    [bold]Keys:[/bold]
      ↑/↓        Move selection
      Enter      Open directory
      Backspace  Go back
      q          Quit

    [bold]Examples:[/bold]
      dutui ~/projects           # Browse interactively
      dutui /var/log --list      # Print a one-level summary
    """
    from .logging import setup_logging

    s = load_settings()
    if bar_width is not None:
        s.DUTUI_BAR_WIDTH = max(1, bar_width)
    setup_logging(s, level=log_level)

    root = _resolve_root(directory)
    result = _scan_root(root)
    _print_skipped(result)

    if list_only:
        _print_listing(result, s.DUTUI_BAR_WIDTH)
        raise typer.Exit(code=0)

    browse(result, s)


def run() -> None:
    app()
