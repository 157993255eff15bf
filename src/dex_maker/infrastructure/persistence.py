"""Persist maker events to the maker_events table.

Rows are only ever appended; the table trigger rejects UPDATE and DELETE.
"""
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_common.enums import MakerEventType, Side, parse_enum
from src.dex_common.numeric import (
    check_decimal,
    int_to_numeric,
    numeric_to_int,
    optional_int_to_numeric,
    optional_numeric_to_int,
)
from src.dex_maker.domain.models import MakerEvent

_INSERT_MAKER_EVENT_SQL = text("""
    INSERT INTO maker_events (
        market_id, side, market_order_id, user_address, custodian_id,
        event_type, size, price, time
    ) VALUES (
        :market_id, :side, :market_order_id, :user_address, :custodian_id,
        :event_type, :size, :price, :time
    )
    RETURNING market_id, side, market_order_id, user_address, custodian_id,
              event_type, size, price, time
""")

# Constraint names from alembic/versions/004_create_maker_events.py
FK_MAKER_EVENTS_MARKET = "fk_maker_events_market_id"


def _row_to_event(row: Any) -> MakerEvent:
    return MakerEvent(
        market_id=numeric_to_int(row.market_id),
        side=parse_enum(Side, row.side),  # type: ignore[arg-type]
        market_order_id=numeric_to_int(row.market_order_id),
        user_address=row.user_address,
        custodian_id=optional_numeric_to_int(row.custodian_id),
        event_type=parse_enum(MakerEventType, row.event_type),  # type: ignore[arg-type]
        size=check_decimal(row.size),
        price=check_decimal(row.price),
        time=row.time,
    )


class MakerEventRepository:
    async def append(self, event: MakerEvent, db: AsyncSession) -> MakerEvent:
        """Insert one row into maker_events within the caller's transaction."""
        result = await db.execute(
            _INSERT_MAKER_EVENT_SQL,
            {
                "market_id": int_to_numeric(event.market_id),
                "side": event.side.value,
                "market_order_id": int_to_numeric(event.market_order_id),
                "user_address": event.user_address,
                "custodian_id": optional_int_to_numeric(event.custodian_id),
                "event_type": event.event_type.value,
                "size": check_decimal(event.size),
                "price": check_decimal(event.price),
                "time": event.time,
            },
        )
        return _row_to_event(result.one())
