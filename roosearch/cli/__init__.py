"""
CLI app assembly — wires all sub-commands into the Typer app.
"""

from __future__ import annotations

import typer

from roosearch.logging_config import configure_logging

app = typer.Typer(
    name="roosearch",
    help="RooSearch — semantic code search over a workspace's Qdrant index.",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR."),
) -> None:
    """RooSearch — semantic code search over a workspace's Qdrant index."""
    configure_logging(log_level)


# Import and register sub-commands
from roosearch.cli.init import init_command            # noqa: E402
from roosearch.cli.query import query_command          # noqa: E402
from roosearch.cli.status import status_command        # noqa: E402
from roosearch.cli.serve_mcp import serve_mcp_command  # noqa: E402

app.command(name="init")(init_command)
app.command(name="query")(query_command)
app.command(name="status")(status_command)
app.command(name="serve-mcp")(serve_mcp_command)
