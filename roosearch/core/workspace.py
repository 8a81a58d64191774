"""
Workspace identity — map a workspace path onto its Qdrant collection name.

The indexer names each workspace's collection ``ws-`` followed by the first
16 hex characters of the SHA-256 of the workspace path, so the same rule has
to be applied at query time.
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

WORKSPACE_ENV = "ROOSEARCH_WORKSPACE"


def collection_name_for(path: str, hash_length: int = 16, prefix: str = "ws-") -> str:
    """Return the collection name for *path*.

    The path is hashed exactly as given; callers that want a canonical form
    should go through :func:`resolve_workspace` first.
    """
    digest = hashlib.sha256(path.encode("utf-8")).hexdigest()
    return f"{prefix}{digest[:hash_length]}"


def resolve_workspace(path: str | Path | None = None) -> Path:
    """Pick the workspace root: explicit *path*, then ``$ROOSEARCH_WORKSPACE``, then cwd."""
    chosen = path or os.environ.get(WORKSPACE_ENV) or Path.cwd()
    return Path(chosen).expanduser().resolve()
