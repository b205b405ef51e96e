"""
Action registration and dispatch: decorator, registry, provider base class.
"""

from actionkit.action.decorator import create_action, get_action_spec
from actionkit.action.provider import ActionProvider
from actionkit.action.registry import registered_actions
from actionkit.action.schema import EmptySchema, schema_parameters, validate_args

__all__ = [
    "ActionProvider",
    "EmptySchema",
    "create_action",
    "get_action_spec",
    "registered_actions",
    "schema_parameters",
    "validate_args",
]
