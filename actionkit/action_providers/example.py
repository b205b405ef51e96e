"""
Example action provider: one plain action and one wallet-bound action.

Copy this file as a starting point for a new provider.

Depends on: models, wallet, action
"""

import json

from pydantic import BaseModel, ConfigDict, Field

from actionkit.action import ActionProvider, EmptySchema, create_action
from actionkit.models import Network
from actionkit.wallet import WalletProvider


class GreetInput(BaseModel):
    """Greet a person by name a number of times."""
    model_config = ConfigDict(extra="forbid", strict=True)
    name: str = Field(..., min_length=1, max_length=50, description="The name of the person to greet")
    times: int = Field(..., ge=1, le=10, description="Number of times to repeat the greeting")


class WalletInfoInput(EmptySchema):
    """Get details of the active wallet."""


class ExampleActionProvider(ActionProvider[WalletProvider]):
    """Demonstrates actions that do and do not use the wallet provider."""

    def __init__(self):
        super().__init__("example", [])

    @create_action(
        name="greet",
        description="Greets a person by name a specified number of times. Useful for testing action providers.",
        schema=GreetInput,
    )
    async def greet(self, args: GreetInput) -> str:
        return " ".join(f"Hello, {args.name}!" for _ in range(args.times))

    @create_action(
        name="get_wallet_info",
        description="Gets information about the current wallet including address, network and balance",
        schema=WalletInfoInput,
    )
    async def get_wallet_info(self, wallet_provider: WalletProvider, args: WalletInfoInput) -> str:
        address = wallet_provider.get_address()
        network = wallet_provider.get_network()
        balance = await wallet_provider.get_balance()
        return json.dumps({
            "address": address,
            "network": network.network_id,
            "chainId": network.chain_id,
            "protocolFamily": network.protocol_family,
            "balance": str(balance),
        }, indent=2)

    def supports_own_network(self, network: Network) -> bool:
        return True


def example_action_provider() -> ExampleActionProvider:
    """Factory for ExampleActionProvider."""
    return ExampleActionProvider()
