"""
RooSearch Python SDK — public API for agents and integrations.

Usage::

    from roosearch.sdk import RooSearch

    rs = RooSearch("/path/to/workspace")

    # Structured results
    for hit in rs.search("where are http retries configured"):
        print(hit.file_path, hit.start_line, hit.score)

    # The same text report the MCP tool returns
    print(rs.query("parse json"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from roosearch.config import load_config
from roosearch.core.pipeline import SearchPipeline
from roosearch.core.results import SearchResult
from roosearch.core.workspace import resolve_workspace


class RooSearch:
    """High-level interface for searching one indexed workspace."""

    def __init__(
        self,
        workspace: Optional[str | Path] = None,
        pipeline: Optional[SearchPipeline] = None,
    ) -> None:
        """Initialize the SDK.

        Parameters
        ----------
        workspace:
            Workspace root whose collection should be searched. If ``None``,
            uses ``$ROOSEARCH_WORKSPACE`` or the current directory.
        pipeline:
            Pre-built pipeline; built from the workspace config when omitted.
        """
        self._root = resolve_workspace(workspace)
        self._config = load_config(self._root)
        self._pipeline = pipeline or SearchPipeline.from_config(self._config)

    @property
    def workspace(self) -> Path:
        return self._root

    @property
    def collection_name(self) -> str:
        """Name of the Qdrant collection holding this workspace's index."""
        return self._pipeline.collection_name(str(self._root))

    def search(self, query: str) -> list[SearchResult]:
        """Semantic search; raises EmbeddingError or SearchError on failure.

        Results keep the server's order; use :meth:`query` for the sorted report.
        """
        return self._pipeline.search(query, str(self._root))

    def query(self, query: str) -> str:
        """Return the text report for *query*. Never raises for service errors."""
        return self._pipeline.run(query, str(self._root))

    def status(self) -> Optional[dict[str, Any]]:
        """Describe the workspace collection, or ``None`` if it was never indexed."""
        return self._pipeline.vector_store.collection_info(self.collection_name)

    def close(self) -> None:
        self._pipeline.close()
