"""
Plain-text rendering of search results for the MCP tool and the CLI.
"""

from __future__ import annotations

from typing import Sequence

from roosearch.core.results import SearchResult


def _plural(count: int) -> str:
    return "result" if count == 1 else "results"


def format_result(result: SearchResult) -> str:
    """Render one result block (ends with a newline)."""
    return (
        f"File: {result.file_path}\n"
        f"Score: {result.score:.3f}\n"
        f"Lines: {result.start_line}-{result.end_line}\n"
        f"Code:\n"
        f"```\n"
        f"{result.code_chunk}\n"
        f"```\n"
    )


def format_results(results: Sequence[SearchResult], query: str) -> str:
    """Render *results* for *query*, best score first.

    The sort is stable, so equal scores keep their input order.
    """
    if not results:
        return f'Query: "{query}"\n\nNo results found.'

    ordered = sorted(results, key=lambda r: r.score, reverse=True)
    blocks = "\n\n".join(format_result(r) for r in ordered)
    count = len(results)

    return (
        f'Query: "{query}"\n\n'
        f"Found {count} {_plural(count)}:\n\n"
        f"{blocks}\n\n"
        f"---\n"
        f"Search completed with {count} {_plural(count)}."
    )
