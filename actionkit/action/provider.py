"""
ActionProvider base class: composition, network support, and get_actions().

Depends on: config, errors, models, wallet, action/registry, action/schema
"""

import inspect
from typing import Any, Generic, Iterator, Optional, Sequence, TypeVar

from actionkit.config import (
    ACTION_NAME_PATTERN,
    ACTION_NAME_SEPARATOR,
    MAX_PROVIDER_NAME_LENGTH,
)
from actionkit.errors import (
    ActionNameCollisionError,
    ActionNotFoundError,
    ActionProviderError,
    ActionResultError,
)
from actionkit.models import Action, ActionSpec, Network
from actionkit.wallet import WalletProvider
from actionkit.action.registry import register_provider_class, registered_actions
from actionkit.action.schema import validate_args

TWalletProvider = TypeVar("TWalletProvider", bound=WalletProvider)


class ActionProvider(Generic[TWalletProvider]):
    """A named set of actions, optionally composed of sub-providers.

    Subclasses declare actions with @create_action. The actions are collected
    when the class statement runs, so every instance of a provider type
    exposes the same specs.

    get_actions() lists this provider's own actions first, then each
    sub-provider's actions (recursively) in the order the sub-providers were
    given. Names are "{provider}_{action}" and must be unique across the
    whole tree.

    supports_network() is true only if this provider and every sub-provider
    support the network. Override supports_own_network() to scope a provider
    to some networks, or supports_network() to change the aggregate rule.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        register_provider_class(cls)

    def __init__(self, name: str, action_providers: Optional[Sequence["ActionProvider"]] = None):
        if not isinstance(name, str) or not name.strip():
            raise ActionProviderError("Provider name must be a non-empty string")
        if len(name) > MAX_PROVIDER_NAME_LENGTH or not ACTION_NAME_PATTERN.match(name):
            raise ActionProviderError(
                f"Invalid provider name '{name}': use up to {MAX_PROVIDER_NAME_LENGTH} "
                "letters, digits, '_' or '-'"
            )
        subs = tuple(action_providers or ())
        for sub in subs:
            if not isinstance(sub, ActionProvider):
                raise ActionProviderError(
                    f"Provider '{name}': sub-providers must be ActionProvider instances, "
                    f"got {type(sub).__name__}"
                )
        self._name = name
        self._action_providers = subs
        self._check_tree()

    def _check_tree(self) -> None:
        seen: set[int] = {id(self)}
        stack = list(self._action_providers)
        while stack:
            provider = stack.pop()
            if id(provider) in seen:
                raise ActionProviderError(
                    f"Provider '{provider.name}' appears more than once in the tree of '{self.name}'"
                )
            seen.add(id(provider))
            stack.extend(provider.action_providers)

    @property
    def name(self) -> str:
        return self._name

    @property
    def action_providers(self) -> tuple["ActionProvider", ...]:
        return self._action_providers

    def __repr__(self) -> str:
        subs = ", ".join(p.name for p in self._action_providers)
        return f"<{type(self).__name__} name={self._name!r} sub_providers=[{subs}]>"

    # -------------------------------------------------------------------------
    # Network support
    # -------------------------------------------------------------------------

    def supports_own_network(self, network: Network) -> bool:
        """Whether this provider's own actions work on ``network``. Default: all."""
        return True

    def supports_network(self, network: Network) -> bool:
        return self.supports_own_network(network) and all(
            p.supports_network(network) for p in self._action_providers
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    @classmethod
    def action_specs(cls) -> tuple[ActionSpec, ...]:
        """Registered specs for this provider type, without binding anything."""
        return registered_actions(cls)

    def qualified_name(self, action_name: str) -> str:
        return f"{self._name}{ACTION_NAME_SEPARATOR}{action_name}"

    def _bind(self, spec: ActionSpec, wallet_provider: Optional[TWalletProvider]) -> Action:
        name = self.qualified_name(spec.name)
        provider = self

        async def invoke(args: Any = None) -> str:
            validated = validate_args(name, spec.schema, args)
            if spec.wallet_bound:
                if wallet_provider is None:
                    raise ActionProviderError(
                        f"Action '{name}' needs a wallet provider; pass one to get_actions()"
                    )
                result = spec.method(provider, wallet_provider, validated)
            else:
                result = spec.method(provider, validated)
            if inspect.isawaitable(result):
                result = await result
            if not isinstance(result, str):
                raise ActionResultError(name, result)
            return result

        return Action(
            name=name,
            description=spec.description,
            schema=spec.schema,
            invoke=invoke,
            provider_name=self._name,
            kind=spec.kind,
        )

    def _iter_actions(self, wallet_provider: Optional[TWalletProvider]) -> Iterator[Action]:
        for spec in self.action_specs():
            yield self._bind(spec, wallet_provider)
        for sub in self._action_providers:
            yield from sub._iter_actions(wallet_provider)

    def get_actions(self, wallet_provider: Optional[TWalletProvider] = None) -> list[Action]:
        """Bind every action in this provider's tree to ``wallet_provider``.

        Unbound actions work without a wallet provider; wallet-bound ones
        raise ActionProviderError when invoked without one.

        Raises:
            ActionNameCollisionError: if two actions in the tree share a name.
        """
        actions: list[Action] = []
        owners: dict[str, str] = {}
        for action in self._iter_actions(wallet_provider):
            if action.name in owners:
                raise ActionNameCollisionError(action.name, (owners[action.name], action.provider_name))
            owners[action.name] = action.provider_name
            actions.append(action)
        return actions

    def get_action(self, name: str, wallet_provider: Optional[TWalletProvider] = None) -> Action:
        """Look up one action by full name, or by bare action name if unambiguous."""
        actions = self.get_actions(wallet_provider)
        for action in actions:
            if action.name == name:
                return action
        matches = [a for a in actions if a.action_name == name]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            raise ActionProviderError(
                f"Action name '{name}' is ambiguous: {', '.join(a.name for a in matches)}"
            )
        raise ActionNotFoundError(name, [a.name for a in actions])
