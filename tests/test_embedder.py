"""
test_embedder.py
----------------
Purpose: The embedding client speaks the {model, input} -> {embeddings} contract
and wraps every failure in EmbeddingError with the cause in the message.
"""
import json
import logging

import httpx
import pytest

from roosearch.core.embedder import Embedder
from roosearch.core.errors import EmbeddingError
from tests.helpers import embedding_transport


def make_embedder(config, **kwargs):
    return Embedder(config, client=httpx.Client(transport=embedding_transport(**kwargs)))


def test_posts_model_and_input_and_returns_first_vector(config):
    seen = []
    embedder = make_embedder(config, body={"embeddings": [[0.1, 0.2], [9.0, 9.0]]}, seen=seen)

    assert embedder.embed_query("parse json") == [0.1, 0.2]

    (request,) = seen
    assert request.method == "POST"
    assert str(request.url) == "http://localhost:11434/api/embed"
    assert json.loads(request.content) == {"model": "nomic-embed-text", "input": "parse json"}


def test_non_2xx_raises_with_reason(config):
    embedder = make_embedder(config, status=500, body={"error": "boom"})
    with pytest.raises(EmbeddingError) as excinfo:
        embedder.embed_query("q")
    assert str(excinfo.value) == (
        "Embedding creation failed: Failed to create embeddings: Internal Server Error"
    )


def test_transport_error_is_wrapped(config):
    embedder = make_embedder(
        config, exc=lambda req: httpx.ConnectError("Connection refused", request=req)
    )
    with pytest.raises(EmbeddingError, match="Embedding creation failed: Connection refused") as excinfo:
        embedder.embed_query("q")
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_timeout_is_wrapped(config):
    embedder = make_embedder(config, exc=lambda req: httpx.ReadTimeout("timed out", request=req))
    with pytest.raises(EmbeddingError, match="timed out"):
        embedder.embed_query("q")


@pytest.mark.parametrize("body", [{}, {"embeddings": []}, {"embeddings": [0.1]}, ["nope"]])
def test_malformed_body_raises(config, body):
    embedder = make_embedder(config, body=body)
    with pytest.raises(EmbeddingError, match="missing 'embeddings'"):
        embedder.embed_query("q")


def test_non_json_body_raises(config):
    transport = httpx.MockTransport(lambda req: httpx.Response(200, content=b"<html>"))
    embedder = Embedder(config, client=httpx.Client(transport=transport))
    with pytest.raises(EmbeddingError, match="invalid JSON"):
        embedder.embed_query("q")


def test_uses_configured_url_and_model(config):
    config.embedding.url = "http://embed.internal:9000/api/embed"
    config.embedding.model = "mxbai-embed-large"
    seen = []
    make_embedder(config, seen=seen).embed_query("q")
    assert str(seen[0].url) == "http://embed.internal:9000/api/embed"
    assert json.loads(seen[0].content)["model"] == "mxbai-embed-large"


@pytest.mark.parametrize("vector", [[None, 0.2], ["abc"]])
def test_non_numeric_vector_raises_and_logs(config, caplog, vector):
    embedder = make_embedder(config, body={"embeddings": [vector]})
    with caplog.at_level(logging.ERROR, logger="roosearch.core.embedder"):
        with pytest.raises(EmbeddingError, match="non-numeric embedding"):
            embedder.embed_query("q")
    assert caplog.records


def test_malformed_body_is_logged(config, caplog):
    embedder = make_embedder(config, body={})
    with caplog.at_level(logging.ERROR, logger="roosearch.core.embedder"):
        with pytest.raises(EmbeddingError):
            embedder.embed_query("q")
    assert any("embeddings" in r.getMessage() for r in caplog.records)
