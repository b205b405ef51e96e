"""
AgentKit: the host-side view of a wallet plus a set of action providers.

Filters providers by the wallet's network and flattens their actions into one
uniquely named list for an agent framework to expose as tools.

Depends on: config, errors, models, wallet, action
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Optional

from actionkit.config import LOG_PREFIX, QUIET
from actionkit.errors import ActionNameCollisionError, ActionNotFoundError, ActionProviderError
from actionkit.models import Action, Network
from actionkit.wallet import WalletProvider
from actionkit.action import ActionProvider


@dataclass
class AgentKitConfig:
    wallet_provider: Optional[WalletProvider] = None
    action_providers: list[ActionProvider] = field(default_factory=list)


class AgentKit:
    """Aggregates action providers for one wallet.

    Providers whose supports_network() is false for the wallet's network are
    left out of get_actions(). Without a wallet provider no filtering is done
    and wallet-bound actions fail when invoked.
    """

    def __init__(self, config: Optional[AgentKitConfig] = None):
        config = config or AgentKitConfig()
        names: set[str] = set()
        for provider in config.action_providers:
            if not isinstance(provider, ActionProvider):
                raise ActionProviderError(
                    f"AgentKit expects ActionProvider instances, got {type(provider).__name__}"
                )
            if provider.name in names:
                raise ActionProviderError(f"Duplicate action provider name: '{provider.name}'")
            names.add(provider.name)
        self.wallet_provider = config.wallet_provider
        self.action_providers: tuple[ActionProvider, ...] = tuple(config.action_providers)

    def active_network(self) -> Optional[Network]:
        if self.wallet_provider is None:
            return None
        return self.wallet_provider.get_network()

    def supported_providers(self, network: Optional[Network] = None) -> list[ActionProvider]:
        """Providers usable on ``network`` (default: the wallet's network)."""
        if network is None:
            network = self.active_network()
        if network is None:
            return list(self.action_providers)
        supported = []
        for provider in self.action_providers:
            if provider.supports_network(network):
                supported.append(provider)
            elif not QUIET:
                print(
                    f"{LOG_PREFIX} Action provider '{provider.name}' does not support network "
                    f"'{network.network_id}' ({network.protocol_family}), skipping",
                    file=sys.stderr,
                )
        return supported

    def _flatten(self, providers: list[ActionProvider]) -> list[Action]:
        actions: list[Action] = []
        owners: dict[str, str] = {}
        for provider in providers:
            for action in provider.get_actions(self.wallet_provider):
                if action.name in owners:
                    raise ActionNameCollisionError(action.name, (owners[action.name], action.provider_name))
                owners[action.name] = action.provider_name
                actions.append(action)
        return actions

    def get_actions(self, network: Optional[Network] = None) -> list[Action]:
        """All actions of the supported providers, in provider order.

        Raises:
            ActionNameCollisionError: if two providers expose the same name.
        """
        return self._flatten(self.supported_providers(network))

    def all_actions(self) -> list[Action]:
        """Actions of every provider, ignoring network support."""
        return self._flatten(list(self.action_providers))

    def provider_actions(self) -> dict[str, list[str]]:
        """Action names grouped by top-level provider name."""
        return {
            provider.name: [a.name for a in provider.get_actions(self.wallet_provider)]
            for provider in self.action_providers
        }

    def get_action(self, name: str) -> Action:
        actions = self.get_actions()
        for action in actions:
            if action.name == name:
                return action
        raise ActionNotFoundError(name, [a.name for a in actions])

    async def invoke(self, name: str, args: Any = None) -> str:
        """Find an action by full name and invoke it."""
        return await self.get_action(name).invoke(args)
