"""
Rich-based terminal output helpers for the RooSearch CLI.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich import box

from roosearch.core.results import SearchResult

console = Console()
error_console = Console(stderr=True)


def success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]✓[/bold green] {escape(message)}")


def error(message: str) -> None:
    """Print a red error message to stderr."""
    error_console.print(f"[bold red]✗[/bold red] {escape(message)}")


def info(message: str) -> None:
    """Print a blue info message."""
    console.print(f"[bold blue]ℹ[/bold blue] {escape(message)}")


def print_report(report: str) -> None:
    """Print a text report verbatim (no markup, code may contain brackets)."""
    console.print(report, markup=False, highlight=False)


def print_results_table(results: Sequence[SearchResult], query: str) -> None:
    """Print search results in a styled Rich table, best score first."""
    if not results:
        info(f'No results found for "{query}".')
        return

    table = Table(
        title=f"Search Results: '{escape(query)}'",
        box=box.ROUNDED,
        show_lines=True,
        title_style="bold magenta",
    )
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("File", style="cyan", min_width=20)
    table.add_column("Lines", style="yellow", width=12, justify="right")
    table.add_column("Score", style="green", width=8, justify="right")
    table.add_column("Preview", style="white", max_width=60)

    ordered = sorted(results, key=lambda r: r.score, reverse=True)
    for i, r in enumerate(ordered, 1):
        preview = r.code_chunk
        # Truncate long previews
        if len(preview) > 120:
            preview = preview[:117] + "..."
        table.add_row(
            str(i),
            Text(r.file_path),
            f"{r.start_line}-{r.end_line}",
            f"{r.score:.3f}",
            Text(preview.replace("\n", " ")),
        )

    console.print(table)
