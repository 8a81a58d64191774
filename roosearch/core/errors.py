"""
Error types raised by the RooSearch clients.

Each message carries the proximate cause so it can be shown to the user as-is.
"""

from __future__ import annotations


class RooSearchError(Exception):
    """Base class for failures talking to the embedding service or Qdrant."""


class EmbeddingError(RooSearchError):
    """The embedding service could not produce a vector for the query."""


class SearchError(RooSearchError):
    """The vector database query failed."""
