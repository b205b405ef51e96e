"""
Data models: pure data classes with no business logic.

Depends on: config
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel

from actionkit.config import ACTION_NAME_SEPARATOR


# =============================================================================
# Enums
# =============================================================================

class ActionKind(str, Enum):
    """How an action method expects to be called."""
    UNBOUND = "unbound"            # method(self, args)
    WALLET_BOUND = "wallet_bound"  # method(self, wallet_provider, args)


# =============================================================================
# Network
# =============================================================================

@dataclass(frozen=True)
class Network:
    """A blockchain network as reported by a wallet provider."""
    protocol_family: str           # "evm", "svm", ...
    network_id: str                # "base-sepolia", "solana-devnet", ...
    chain_id: Optional[str] = None


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class ActionSpec:
    """Registration record for one decorated provider method."""
    name: str
    description: str
    schema: type[BaseModel]
    method: Callable[..., Any]     # undecorated function
    kind: ActionKind

    @property
    def wallet_bound(self) -> bool:
        return self.kind == ActionKind.WALLET_BOUND


@dataclass(frozen=True)
class Action:
    """A ready-to-invoke action bound to one provider instance and wallet."""
    name: str
    description: str
    schema: type[BaseModel]
    invoke: Callable[..., Awaitable[str]] = field(repr=False, compare=False)
    provider_name: str = ""
    kind: ActionKind = ActionKind.UNBOUND

    @property
    def action_name(self) -> str:
        """Name without the provider prefix."""
        prefix = f"{self.provider_name}{ACTION_NAME_SEPARATOR}"
        if self.provider_name and self.name.startswith(prefix):
            return self.name[len(prefix):]
        return self.name

    @property
    def parameters(self) -> dict:
        """JSON Schema of the input, for tool-calling hosts."""
        from actionkit.action.schema import schema_parameters
        return schema_parameters(self.schema)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }
