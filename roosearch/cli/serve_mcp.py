"""
roosearch serve-mcp — start the MCP server for AI agent integration.
"""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from roosearch.config import load_config
from roosearch.core.workspace import resolve_workspace
from roosearch.utils.display import error, error_console


def serve_mcp_command(
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)."),
) -> None:
    """Start the RooSearch MCP server (stdio transport) for AI agents."""
    root = resolve_workspace(workspace)
    try:
        config = load_config(root)
    except (ValidationError, ValueError) as exc:
        error(f"Invalid configuration: {exc}")
        raise typer.Exit(1)

    # stdout carries the protocol; talk to the user on stderr only.
    error_console.print("[bold blue]ℹ[/bold blue] Starting RooSearch MCP Server (stdio transport)...")

    from roosearch.mcp_server import run_mcp_server
    run_mcp_server(root, config=config)
