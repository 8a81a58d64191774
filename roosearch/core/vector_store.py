"""
VectorStore — query a workspace collection on a Qdrant server.

The collections are written by the indexer; this side only reads them. One
``QdrantClient`` is created per store and reused for every query.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

from qdrant_client import QdrantClient
from qdrant_client.http import models

from roosearch.config import qdrant_api_key
from roosearch.core.errors import SearchError
from roosearch.core.results import RawPoint

if TYPE_CHECKING:
    from roosearch.config import RooSearchConfig

logger = logging.getLogger(__name__)


class VectorStore:
    """Thin wrapper around a QdrantClient with the configured search parameters."""

    def __init__(self, config: "RooSearchConfig", client: Optional[QdrantClient] = None) -> None:
        self._search = config.search
        if client is None:
            client = QdrantClient(
                url=config.qdrant.url,
                api_key=qdrant_api_key(config),
                timeout=config.qdrant.timeout,
            )
        self._client = client

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def search(self, vector: Sequence[float], collection: str) -> list[RawPoint]:
        """Run an ANN query against *collection*.

        Points under the score threshold are excluded by the server. The
        returned order is whatever the server sent.

        Raises
        ------
        SearchError
            On any transport or server-side failure.
        """
        logger.debug(
            "querying collection=%s limit=%d threshold=%.2f hnsw_ef=%d exact=%s",
            collection, self._search.limit, self._search.score_threshold,
            self._search.hnsw_ef, self._search.exact,
        )
        try:
            response = self._client.query_points(
                collection_name=collection,
                query=[float(v) for v in vector],
                score_threshold=self._search.score_threshold,
                limit=self._search.limit,
                search_params=models.SearchParams(
                    hnsw_ef=self._search.hnsw_ef,
                    exact=self._search.exact,
                ),
                with_payload=models.PayloadSelectorInclude(
                    include=list(self._search.payload_fields),
                ),
            )
            points = getattr(response, "points", response)
            return [
                RawPoint(
                    id=point.id,
                    score=float(point.score),
                    payload=point.payload,
                )
                for point in points
            ]
        except Exception as exc:
            logger.error("Search operation failed on %s: %s", collection, exc)
            raise SearchError(f"Search operation failed: {exc}") from exc

    def collection_info(self, collection: str) -> Optional[dict[str, Any]]:
        """Describe *collection*, or return ``None`` if it does not exist."""
        try:
            if not self._client.collection_exists(collection_name=collection):
                return None
            info = self._client.get_collection(collection_name=collection)
        except Exception as exc:
            raise SearchError(f"Search operation failed: {exc}") from exc

        status = getattr(info.status, "value", info.status)
        return {
            "name": collection,
            "points_count": info.points_count or 0,
            "status": str(status),
        }

    def close(self) -> None:
        self._client.close()
