"""Domain models for dex_market: pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class RegisteredBase:
    """Base asset is a registered coin."""

    coin_id: int


@dataclass(frozen=True)
class GenericBase:
    """Base asset is not a coin; only a free-text name identifies it."""

    name: str


BaseAsset = RegisteredBase | GenericBase


@dataclass(frozen=True)
class NewMarketRegistration:
    market_id: int
    time: datetime  # UTC
    base: BaseAsset
    quote_id: int
    lot_size: Decimal
    tick_size: Decimal
    min_size: Decimal
    underwriter_id: int


@dataclass(frozen=True)
class MarketRegistrationEvent:
    market_id: int
    time: datetime
    base: BaseAsset
    quote_id: int
    lot_size: Decimal
    tick_size: Decimal
    min_size: Decimal
    underwriter_id: int

    @property
    def base_id(self) -> int | None:
        return self.base.coin_id if isinstance(self.base, RegisteredBase) else None

    @property
    def base_name_generic(self) -> str | None:
        return self.base.name if isinstance(self.base, GenericBase) else None
