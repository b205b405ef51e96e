"""
Bundled action providers.
"""

from actionkit.action_providers.example import (
    ExampleActionProvider,
    GreetInput,
    WalletInfoInput,
    example_action_provider,
)

__all__ = [
    "ExampleActionProvider",
    "GreetInput",
    "WalletInfoInput",
    "example_action_provider",
]
