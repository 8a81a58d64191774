"""
Shared fixtures.

The embedding service is replaced by an httpx.MockTransport and Qdrant by a
small stub exposing the client methods RooSearch calls, so no test touches the
network.
"""
from __future__ import annotations

import httpx
import pytest

from roosearch.config import RooSearchConfig
from roosearch.core.embedder import Embedder
from roosearch.core.pipeline import SearchPipeline
from roosearch.core.vector_store import VectorStore
from tests.helpers import FakeQdrant, embedding_transport


@pytest.fixture
def config():
    return RooSearchConfig()


@pytest.fixture
def make_pipeline(config):
    """Build a SearchPipeline over a mocked embedding service and a FakeQdrant."""

    def _make(qdrant=None, **transport_kwargs):
        qdrant = qdrant or FakeQdrant()
        embedder = Embedder(config, client=httpx.Client(transport=embedding_transport(**transport_kwargs)))
        store = VectorStore(config, client=qdrant)
        return SearchPipeline(config, embedder, store)

    return _make
