"""
Registers action descriptors as MCP tools.

Each tool takes a single ``params`` object and returns the action's string
result. FastMCP only checks that ``params`` is an object; the action's own
schema does the validation, so bad input and other ActionKit errors come back
to the client as a JSON error string instead of failing the call. The
published input schema still describes the action's fields.

Depends on: config, errors, models, agentkit, action/schema, mcp/__init__
"""

import json
import sys
from typing import Any, Iterable, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from actionkit.config import LOG_PREFIX, QUIET
from actionkit.errors import ActionKitError, ActionValidationError
from actionkit.models import Action, ActionKind
from actionkit.action.schema import schema_parameters
from actionkit.agentkit import AgentKit
from actionkit.mcp import all_tools, visible_tools


def error_result(e: ActionKitError) -> str:
    payload = {"success": False, "error": str(e)}
    if isinstance(e, ActionValidationError):
        payload["details"] = e.to_dict()["errors"]
    return json.dumps(payload)


def make_tool_fn(action: Action):
    """Build the coroutine FastMCP calls for the tool."""

    async def tool(params: Optional[dict[str, Any]] = None) -> str:
        try:
            return await action.invoke(params)
        except ActionKitError as e:
            return error_result(e)

    tool.__name__ = action.name
    tool.__qualname__ = action.name
    tool.__doc__ = action.description
    return tool


def tool_input_schema(action: Action) -> dict:
    """Input schema published for the tool: ``params`` described by the action's fields."""
    params = schema_parameters(action.schema)
    defs = params.pop("$defs", None)
    input_schema: dict = {
        "type": "object",
        "properties": {"params": params},
        "title": f"{action.name}Arguments",
    }
    if params["required"]:
        input_schema["required"] = ["params"]
    if defs:
        input_schema["$defs"] = defs
    return input_schema


def tool_annotations(action: Action) -> ToolAnnotations:
    return ToolAnnotations(
        title=action.action_name.replace("_", " ").replace("-", " ").title(),
        openWorldHint=action.kind == ActionKind.WALLET_BOUND,
    )


def register_actions(mcp: FastMCP, actions: Iterable[Action]) -> list[str]:
    """Add one tool per action. Returns the registered tool names."""
    names = []
    snapshot = all_tools(mcp)
    for action in actions:
        mcp.add_tool(
            make_tool_fn(action),
            name=action.name,
            description=action.description,
            annotations=tool_annotations(action),
        )
        tool = visible_tools(mcp)[action.name]
        tool.parameters = tool_input_schema(action)
        snapshot[action.name] = tool
        names.append(action.name)
    if not QUIET:
        print(f"{LOG_PREFIX} Registered {len(names)} MCP tool(s)", file=sys.stderr)
    return names


def register_agentkit(mcp: FastMCP, agentkit: AgentKit) -> list[str]:
    """Register every provider's actions, then hide those unsupported on the active network."""
    from actionkit.mcp.visibility import sync_network_visibility

    names = register_actions(mcp, agentkit.all_actions())
    sync_network_visibility(mcp, agentkit)
    return names
