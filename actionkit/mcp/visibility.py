"""
Network-driven tool show/hide.

Tools of providers that do not support the active network are removed from
the server's tool list and restored when the network changes back.

Depends on: config, models, agentkit, mcp/__init__
"""

import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from actionkit.config import LOG_PREFIX, QUIET
from actionkit.models import Network
from actionkit.agentkit import AgentKit
from actionkit.mcp import all_tools, visible_tools


def compute_visible_tools(agentkit: AgentKit, network: Optional[Network] = None) -> set:
    """Names of the actions that should be listed on ``network``."""
    return {action.name for action in agentkit.get_actions(network)}


def sync_network_visibility(mcp: FastMCP, agentkit: AgentKit, network: Optional[Network] = None) -> tuple[set, set]:
    """Show tools usable on ``network`` and hide the rest.

    Only tools registered through register_actions() are touched.
    Returns (added, removed) tool names.
    """
    snapshot = all_tools(mcp)
    tools = visible_tools(mcp)
    desired = compute_visible_tools(agentkit, network) & set(snapshot)
    current = set(snapshot) & set(tools)

    to_add = desired - current
    to_remove = current - desired
    for name in to_add:
        tools[name] = snapshot[name]
    for name in to_remove:
        tools.pop(name, None)

    if (to_add or to_remove) and not QUIET:
        added_str = ", ".join(sorted(to_add)) if to_add else "none"
        removed_str = ", ".join(sorted(to_remove)) if to_remove else "none"
        print(f"{LOG_PREFIX} Tool visibility: +[{added_str}] -[{removed_str}] (total: {len(tools)})", file=sys.stderr)
    return to_add, to_remove


async def notify_tools_changed(sessions: set) -> set:
    """Send tools/list_changed to each session. Returns the sessions that failed."""
    dead = set()
    for session in list(sessions):
        try:
            await session.send_tool_list_changed()
        except Exception as e:
            print(f"{LOG_PREFIX} Dropping MCP session after notify failure: {e}", file=sys.stderr)
            dead.add(session)
    sessions -= dead
    return dead
