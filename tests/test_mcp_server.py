"""
test_mcp_server.py
------------------
Purpose: The MCP server exposes exactly one `roosearch` tool taking `query`.
"""
import asyncio

from roosearch.core.workspace import collection_name_for
from roosearch.mcp_server import TOOL_DESCRIPTION, TOOL_NAME, create_mcp_server
from tests.helpers import FakeQdrant, code_payload, point


def test_single_tool_with_query_argument(make_pipeline):
    server = create_mcp_server(make_pipeline(), "/repo")
    tools = asyncio.run(server.list_tools())

    assert [t.name for t in tools] == [TOOL_NAME]
    tool = tools[0]
    assert tool.description == TOOL_DESCRIPTION
    assert tool.inputSchema["required"] == ["query"]
    assert tool.inputSchema["properties"]["query"]["type"] == "string"


def test_tool_searches_the_server_workspace(make_pipeline):
    qdrant = FakeQdrant(points=[point(1, 0.8, code_payload())])
    server = create_mcp_server(make_pipeline(qdrant), "/srv/workspace")
    asyncio.run(server.call_tool(TOOL_NAME, {"query": "parse json"}))

    assert qdrant.calls[0]["collection_name"] == collection_name_for("/srv/workspace")
