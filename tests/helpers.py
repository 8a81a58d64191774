"""
Test doubles for the two network collaborators.
"""
from __future__ import annotations

import json
from types import SimpleNamespace

import httpx


class FakeQdrant:
    """Records query_points calls and answers with canned points or an error."""

    def __init__(self, points=None, error=None, collections=None):
        self.points = points or []
        self.error = error
        self.collections = collections or {}
        self.calls = []
        self.closed = False

    def query_points(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(points=self.points)

    def collection_exists(self, collection_name):
        if self.error is not None:
            raise self.error
        return collection_name in self.collections

    def get_collection(self, collection_name):
        return self.collections[collection_name]

    def close(self):
        self.closed = True


def point(id, score, payload):
    return SimpleNamespace(id=id, score=score, payload=payload)


def code_payload(file_path="a.ts", start=10, end=20, code="foo()"):
    return {"filePath": file_path, "startLine": start, "endLine": end, "codeChunk": code}


def embedding_transport(status=200, body=None, exc=None, seen=None):
    """MockTransport answering every POST with *body*, or raising exc(request)."""
    if body is None:
        body = {"embeddings": [[0.1, 0.2]]}

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if exc is not None:
            raise exc(request)
        return httpx.Response(status, content=json.dumps(body).encode("utf-8"))

    return httpx.MockTransport(handler)
