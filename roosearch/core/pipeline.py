"""
Search pipeline for RooSearch.

Flow:
  1. Derive the collection name from the workspace path.
  2. Embed the query through the embedding service.
  3. Query the workspace collection in Qdrant.
  4. Drop unusable points and normalise the rest.
  5. Render the text report.

``run`` is the tool-facing entry point: it always returns text, turning
embedding or search failures into an ``Error executing search: ...`` line.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roosearch.core.embedder import Embedder
from roosearch.core.errors import RooSearchError
from roosearch.core.formatter import format_results
from roosearch.core.results import SearchResult, transform
from roosearch.core.vector_store import VectorStore
from roosearch.core.workspace import collection_name_for

if TYPE_CHECKING:
    from roosearch.config import RooSearchConfig

logger = logging.getLogger(__name__)


class SearchPipeline:
    """Compose embedder, vector store and formatter into one request cycle.

    The collaborators are built once and shared by every call; nothing is
    kept between calls.
    """

    def __init__(self, config: "RooSearchConfig", embedder, vector_store) -> None:
        self._config = config
        self._embedder = embedder
        self._vector_store = vector_store

    @classmethod
    def from_config(cls, config: "RooSearchConfig") -> "SearchPipeline":
        return cls(config, Embedder(config), VectorStore(config))

    @property
    def vector_store(self):
        return self._vector_store

    def collection_name(self, workspace: str) -> str:
        return collection_name_for(
            workspace,
            hash_length=self._config.workspace.hash_length,
            prefix=self._config.workspace.prefix,
        )

    def search(self, query: str, workspace: str) -> list[SearchResult]:
        """Return the normalised results for *query*; raises RooSearchError."""
        collection = self.collection_name(workspace)
        vector = self._embedder.embed_query(query)
        points = self._vector_store.search(vector, collection)
        results = transform(points)
        logger.info(
            "search collection=%s points=%d usable=%d", collection, len(points), len(results)
        )
        return results

    def run(self, query: str, workspace: str) -> str:
        """Search and render; failures come back as text instead of raising."""
        try:
            results = self.search(query, workspace)
        except RooSearchError as exc:
            logger.error("Error executing search pipeline: %s", exc)
            return f"Error executing search: {exc}"
        return format_results(results, query)

    def close(self) -> None:
        self._embedder.close()
        self._vector_store.close()
