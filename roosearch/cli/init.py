"""
roosearch init — write a default roosearch.json for the workspace.
"""

from __future__ import annotations

from typing import Optional

import typer

from roosearch.config import config_path, create_default_config, write_config
from roosearch.core.workspace import resolve_workspace
from roosearch.utils.display import error, info, success


def init_command(
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    """Create .roosearch/roosearch.json with default settings."""
    root = resolve_workspace(workspace)
    existing = config_path(root)
    if existing.exists() and not force:
        error(f"Config already exists at {existing}. Use --force to overwrite.")
        raise typer.Exit(1)

    path = write_config(root, create_default_config())
    success(f"Wrote {path}")
    info("Edit the Qdrant and embedding URLs there if they are not on localhost.")
