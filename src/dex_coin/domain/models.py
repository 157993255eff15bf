"""Domain models for dex_coin: pure dataclasses, no business logic."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewCoin:
    """A coin as observed on chain, before the database assigns an id."""

    account_address: str
    module_name: str
    struct_name: str
    symbol: str | None = None
    name: str | None = None
    decimals: int | None = None


@dataclass(frozen=True)
class Coin:
    id: int
    account_address: str
    module_name: str
    struct_name: str
    symbol: str | None
    name: str | None
    decimals: int | None

    @property
    def type_tag(self) -> str:
        """Fully-qualified on-chain type, e.g. 0x1::aptos_coin::AptosCoin."""
        return f"{self.account_address}::{self.module_name}::{self.struct_name}"
