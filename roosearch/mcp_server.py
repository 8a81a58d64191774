"""
RooSearch MCP Server — expose workspace code search over the Model Context Protocol.

Agents call the ``roosearch`` tool with a natural-language query; the
workspace is fixed when the server starts (the host's working directory,
``$ROOSEARCH_WORKSPACE`` or ``--workspace``).

Run with: roosearch serve-mcp
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from roosearch.config import RooSearchConfig, load_config
from roosearch.core.pipeline import SearchPipeline
from roosearch.core.workspace import resolve_workspace

logger = logging.getLogger(__name__)

TOOL_NAME = "roosearch"
TOOL_DESCRIPTION = "Query the workspace using roosearch qdrant indexing"


def create_mcp_server(pipeline: SearchPipeline, workspace: str | Path) -> FastMCP:
    """Build a FastMCP server whose single tool searches *workspace*."""
    workspace_str = str(workspace)
    mcp = FastMCP(
        "RooSearch",
        instructions="Semantic code search over the workspace's Qdrant index.",
    )

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def roosearch(query: str) -> str:
        """Search the workspace semantically.

        Args:
            query: Search query string

        Returns:
            Matching code locations with scores and line ranges, or an error line.
        """
        return pipeline.run(query, workspace_str)

    return mcp


# -----------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------

def run_mcp_server(
    workspace: Optional[str | Path] = None,
    config: Optional[RooSearchConfig] = None,
) -> None:
    """Start the MCP server using stdio transport.

    *config* defaults to the workspace's roosearch.json.
    """
    root = resolve_workspace(workspace)
    if config is None:
        config = load_config(root)
    pipeline = SearchPipeline.from_config(config)
    logger.info("serving %s for workspace %s (%s)", TOOL_NAME, root, pipeline.collection_name(str(root)))
    try:
        create_mcp_server(pipeline, root).run(transport="stdio")
    finally:
        pipeline.close()


if __name__ == "__main__":
    run_mcp_server()
