"""
Result shaping — validate raw Qdrant points and project them into SearchResults.

Indexed payloads use the indexer's camelCase keys (``filePath``, ``codeChunk``,
``startLine``, ``endLine``). A point is only usable when every one of those is
present and truthy; anything else is dropped before formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

REQUIRED_FIELDS = ("filePath", "startLine", "endLine", "codeChunk")


@dataclass(frozen=True)
class RawPoint:
    """A scored point as returned by the vector database."""

    id: Union[str, int]
    score: float
    payload: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class CodePayload:
    file_path: str
    code_chunk: str
    start_line: Any
    end_line: Any


@dataclass(frozen=True)
class SearchResult:
    """One matching code location, ready for display."""

    file_path: str
    score: float
    start_line: Any
    end_line: Any
    code_chunk: str


def parse_payload(payload: Optional[Mapping[str, Any]]) -> Optional[CodePayload]:
    """Parse *payload* into a CodePayload, or ``None`` when it is unusable.

    Falsy values count as missing, so ``startLine == 0`` or an empty
    ``codeChunk`` make the payload invalid.
    """
    if not payload:
        return None
    if not all(payload.get(key) for key in REQUIRED_FIELDS):
        return None
    if not isinstance(payload["filePath"], str) or not isinstance(payload["codeChunk"], str):
        return None
    return CodePayload(
        file_path=payload["filePath"],
        code_chunk=payload["codeChunk"],
        start_line=payload["startLine"],
        end_line=payload["endLine"],
    )


def filter_valid(points: Iterable[RawPoint]) -> list[RawPoint]:
    """Keep only the points whose payload parses."""
    return [p for p in points if parse_payload(p.payload) is not None]


def to_result(point: RawPoint) -> Optional[SearchResult]:
    """Project a validated point into a SearchResult (code chunk stripped)."""
    if not point.payload or "filePath" not in point.payload:
        return None
    parsed = parse_payload(point.payload)
    if parsed is None:
        return None
    return SearchResult(
        file_path=parsed.file_path,
        score=point.score,
        start_line=parsed.start_line,
        end_line=parsed.end_line,
        code_chunk=parsed.code_chunk.strip(),
    )


def transform(points: Iterable[RawPoint]) -> list[SearchResult]:
    """Filter, project and drop unusable points, keeping input order."""
    results = (to_result(p) for p in filter_valid(points))
    return [r for r in results if r is not None]
