"""Maker event domain model: pure dataclass, no SQLAlchemy dependency."""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.dex_common.enums import MakerEventType, Side


@dataclass(frozen=True)
class MakerEvent:
    market_id: int
    side: Side
    market_order_id: int
    user_address: str
    custodian_id: int | None  # None: self-custodied
    event_type: MakerEventType
    size: Decimal
    price: Decimal
    time: datetime  # UTC

    @property
    def is_self_custodied(self) -> bool:
        return self.custodian_id is None
