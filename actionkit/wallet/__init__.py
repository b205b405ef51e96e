"""
Abstract wallet provider interface.

Actions that declare a wallet parameter receive the wallet provider that was
passed to get_actions(). Concrete wallets (EVM, Solana, ...) live outside this
package; they only need to implement the four methods below.

Depends on: models
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Union

from actionkit.models import Network


class WalletProvider(ABC):
    """Abstract wallet provider. Implement for each chain."""

    @abstractmethod
    def get_address(self) -> str:
        ...

    @abstractmethod
    def get_network(self) -> Network:
        ...

    @abstractmethod
    async def get_balance(self) -> Union[int, Decimal]:
        """Native balance in the chain's smallest unit (wei, lamports, ...)."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...
