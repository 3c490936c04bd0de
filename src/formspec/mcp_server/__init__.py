"""
MCP Server module for FormSpec.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from formspec.mcp_server.server import create_mcp_server, create_sse_app, run_mcp_server
from formspec.mcp_server.tools import get_mcp_tools, load_formspec

__all__ = [
    "create_mcp_server",
    "create_sse_app",
    "run_mcp_server",
    "get_mcp_tools",
    "load_formspec",
]
