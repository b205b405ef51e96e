"""
MCP server setup for exposing actions as tools.

Depends on: config
"""

from mcp.server.fastmcp import FastMCP

from actionkit.config import MCP_INSTRUCTIONS, MCP_SERVER_NAME


def create_mcp(name: str = MCP_SERVER_NAME) -> FastMCP:
    """Create a FastMCP server with ActionKit instructions."""
    return FastMCP(name, instructions=MCP_INSTRUCTIONS)


def all_tools(mcp: FastMCP) -> dict:
    """Snapshot of every action tool registered on ``mcp``, hidden ones included."""
    tools = getattr(mcp, "_actionkit_all_tools", None)
    if tools is None:
        tools = {}
        mcp._actionkit_all_tools = tools
    return tools


def visible_tools(mcp: FastMCP) -> dict:
    """Tools currently listed by ``mcp``."""
    return mcp._tool_manager._tools
