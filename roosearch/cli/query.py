"""
roosearch query — semantic search across the indexed workspace.
"""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from roosearch.core.errors import RooSearchError
from roosearch.sdk import RooSearch
from roosearch.utils.display import error, print_report, print_results_table


def query_command(
    question: str = typer.Argument(..., help="Natural language query to search for."),
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)."),
    table: bool = typer.Option(False, "--table", "-t", help="Show a table instead of the text report."),
) -> None:
    """Search the workspace semantically."""
    try:
        rs = RooSearch(workspace)
    except (ValidationError, ValueError) as exc:
        error(f"Invalid configuration: {exc}")
        raise typer.Exit(1)

    try:
        if not table:
            print_report(rs.query(question))
            return
        try:
            results = rs.search(question)
        except RooSearchError as exc:
            error(str(exc))
            raise typer.Exit(1)
        print_results_table(results, question)
    finally:
        rs.close()
