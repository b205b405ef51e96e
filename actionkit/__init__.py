"""
ActionKit: schema-validated actions for agent runtimes.

Providers declare actions with @create_action. get_actions() binds them to a
wallet provider and returns descriptors a host can expose as tools.
"""

from actionkit.errors import (
    ActionKitError,
    ActionNameCollisionError,
    ActionNotFoundError,
    ActionProviderError,
    ActionRegistrationError,
    ActionResultError,
    ActionValidationError,
)
from actionkit.models import Action, ActionKind, ActionSpec, Network
from actionkit.wallet import WalletProvider
from actionkit.action import ActionProvider, EmptySchema, create_action
from actionkit.agentkit import AgentKit, AgentKitConfig

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionKind",
    "ActionKitError",
    "ActionNameCollisionError",
    "ActionNotFoundError",
    "ActionProvider",
    "ActionProviderError",
    "ActionRegistrationError",
    "ActionResultError",
    "ActionSpec",
    "ActionValidationError",
    "AgentKit",
    "AgentKitConfig",
    "EmptySchema",
    "Network",
    "WalletProvider",
    "create_action",
]
