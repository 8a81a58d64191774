"""
roosearch status — show which collection the workspace maps to and whether it is indexed.
"""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from roosearch.config import config_path
from roosearch.core.errors import RooSearchError
from roosearch.sdk import RooSearch
from roosearch.utils.display import console, error

from rich.table import Table
from rich import box


def status_command(
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)."),
) -> None:
    """Show the workspace collection and the configured services."""
    try:
        rs = RooSearch(workspace)
    except (ValidationError, ValueError) as exc:
        error(f"Invalid configuration: {exc}")
        raise typer.Exit(1)

    try:
        try:
            info = rs.status()
        except RooSearchError as exc:
            error(str(exc))
            raise typer.Exit(1)
    finally:
        rs.close()

    cfg = config_path(rs.workspace)
    table = Table(title="RooSearch Workspace", box=box.ROUNDED, title_style="bold cyan", show_header=False)
    table.add_column("Key", style="dim")
    table.add_column("Value", style="white")
    table.add_row("Workspace", str(rs.workspace))
    table.add_row("Config", str(cfg) if cfg.exists() else "(defaults)")
    table.add_row("Collection", rs.collection_name)
    if info is None:
        table.add_row("Indexed", "[yellow]no — collection not found[/yellow]")
    else:
        table.add_row("Indexed", "[green]yes[/green]")
        table.add_row("Points", str(info["points_count"]))
        table.add_row("Status", info["status"])

    console.print(table)
