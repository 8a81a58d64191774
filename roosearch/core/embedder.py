"""
Embedder — turn a query into a vector via an Ollama-style embedding endpoint.

The service is called with ``POST {"model": ..., "input": ...}`` and answers
``{"embeddings": [[...], ...]}``; only the first vector is used.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import httpx

from roosearch.core.errors import EmbeddingError

if TYPE_CHECKING:
    from roosearch.config import RooSearchConfig

logger = logging.getLogger(__name__)


class Embedder:
    """Generate query embeddings through the configured HTTP endpoint."""

    def __init__(self, config: "RooSearchConfig", client: Optional[httpx.Client] = None) -> None:
        self._url = config.embedding.url
        self._model_name = config.embedding.model
        self._client = client or httpx.Client(timeout=config.embedding.timeout)

    @property
    def model_name(self) -> str:
        return self._model_name

    def embed_query(self, text: str) -> list[float]:
        """Embed a single query string.

        Raises
        ------
        EmbeddingError
            On a non-2xx answer, a transport failure, or a malformed body.
        """
        logger.debug("embedding query model=%s url=%s chars=%d", self._model_name, self._url, len(text))
        try:
            response = self._client.post(
                self._url,
                json={"model": self._model_name, "input": text},
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.error("Embedding creation failed: %s", exc)
            raise EmbeddingError(f"Embedding creation failed: {exc}") from exc

        if not response.is_success:
            logger.error("Embedding service answered %d %s", response.status_code, response.reason_phrase)
            raise EmbeddingError(
                f"Embedding creation failed: Failed to create embeddings: {response.reason_phrase}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Embedding service returned invalid JSON: %s", exc)
            raise EmbeddingError(f"Embedding creation failed: invalid JSON response ({exc})") from exc

        embeddings = data.get("embeddings") if isinstance(data, dict) else None
        if not isinstance(embeddings, list) or not embeddings or not isinstance(embeddings[0], list):
            logger.error("Embedding response has no 'embeddings' list")
            raise EmbeddingError("Embedding creation failed: response missing 'embeddings'")
        try:
            return [float(v) for v in embeddings[0]]
        except (TypeError, ValueError) as exc:
            logger.error("Embedding vector has non-numeric values: %s", exc)
            raise EmbeddingError(f"Embedding creation failed: non-numeric embedding ({exc})") from exc

    def close(self) -> None:
        self._client.close()
