"""MarketRepository: concrete implementation of MarketRepositoryProtocol.

All queries use raw text() SQL (no ORM).
market_id / underwriter_id are NUMERIC: bound as Decimal, read back as int.
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_common.numeric import check_decimal, int_to_numeric, numeric_to_int
from src.dex_market.domain.models import (
    BaseAsset,
    GenericBase,
    MarketRegistrationEvent,
    NewMarketRegistration,
    RegisteredBase,
)

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_INSERT_MARKET_SQL = text("""
    INSERT INTO market_registration_events (
        market_id, time,
        base_id, base_name_generic, quote_id,
        lot_size, tick_size, min_size,
        underwriter_id
    ) VALUES (
        :market_id, :time,
        :base_id, :base_name_generic, :quote_id,
        :lot_size, :tick_size, :min_size,
        :underwriter_id
    )
    RETURNING market_id, time,
              base_id, base_name_generic, quote_id,
              lot_size, tick_size, min_size,
              underwriter_id
""")

# Constraint names from alembic/versions/003_create_market_registration_events.py
PK_MARKET_REGISTRATION_EVENTS = "pk_market_registration_events"
FK_MARKET_BASE_COIN = "fk_market_registration_events_base_id"
FK_MARKET_QUOTE_COIN = "fk_market_registration_events_quote_id"

# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _base_columns(base: BaseAsset) -> tuple[int | None, str | None]:
    """Split the tagged union into (base_id, base_name_generic); exactly one is set."""
    if isinstance(base, RegisteredBase):
        return base.coin_id, None
    if isinstance(base, GenericBase):
        return None, base.name
    raise TypeError(f"unsupported base asset: {type(base).__name__}")


def _row_to_base(row: Any) -> BaseAsset:
    if row.base_id is None:
        return GenericBase(name=row.base_name_generic)
    return RegisteredBase(coin_id=row.base_id)


def _row_to_market(row: Any) -> MarketRegistrationEvent:
    return MarketRegistrationEvent(
        market_id=numeric_to_int(row.market_id),
        time=row.time,
        base=_row_to_base(row),
        quote_id=row.quote_id,
        lot_size=check_decimal(row.lot_size),
        tick_size=check_decimal(row.tick_size),
        min_size=check_decimal(row.min_size),
        underwriter_id=numeric_to_int(row.underwriter_id),
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class MarketRepository:
    """Concrete repository: one INSERT ... RETURNING per registration."""

    async def insert(
        self, registration: NewMarketRegistration, db: AsyncSession
    ) -> MarketRegistrationEvent:
        base_id, base_name_generic = _base_columns(registration.base)
        result = await db.execute(
            _INSERT_MARKET_SQL,
            {
                "market_id": int_to_numeric(registration.market_id),
                "time": registration.time,
                "base_id": base_id,
                "base_name_generic": base_name_generic,
                "quote_id": registration.quote_id,
                "lot_size": check_decimal(registration.lot_size),
                "tick_size": check_decimal(registration.tick_size),
                "min_size": check_decimal(registration.min_size),
                "underwriter_id": int_to_numeric(registration.underwriter_id),
            },
        )
        return _row_to_market(result.one())
