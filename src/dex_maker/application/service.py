"""MakerEventLogService: append-only ledger of maker-side order events.

Order state (placed, partially filled, filled, cancelled, evicted) is never
stored; it is the sequence of rows for one (market_id, market_order_id).
The market reference is not pre-checked: the foreign key rejects events for
unregistered markets and nothing is written.
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_common.db_errors import CONNECTION_ERRORS, raise_translated
from src.dex_common.enums import MakerEventType, Side
from src.dex_common.errors import UnknownMarketError
from src.dex_common.validation import validate_request
from src.dex_maker.application.schemas import RecordMakerEventRequest
from src.dex_maker.domain.models import MakerEvent
from src.dex_maker.domain.repository import MakerEventRepositoryProtocol
from src.dex_maker.infrastructure.persistence import (
    FK_MAKER_EVENTS_MARKET,
    MakerEventRepository,
)

logger = logging.getLogger(__name__)


class MakerEventLogService:
    def __init__(self, repo: MakerEventRepositoryProtocol | None = None) -> None:
        self._repo: MakerEventRepositoryProtocol = repo or MakerEventRepository()

    async def record_maker_event(
        self,
        db: AsyncSession,
        *,
        market_id: int,
        side: Side | str,
        market_order_id: int,
        user_address: str,
        custodian_id: int | None = None,
        event_type: MakerEventType | str,
        size: Decimal,
        price: Decimal,
        time: datetime,
    ) -> MakerEvent:
        """Append one maker event. Repeating a call appends another row."""
        request = validate_request(
            RecordMakerEventRequest,
            {
                "market_id": market_id,
                "side": side,
                "market_order_id": market_order_id,
                "user_address": user_address,
                "custodian_id": custodian_id,
                "event_type": event_type,
                "size": size,
                "price": price,
                "time": time,
            },
        )
        event = request.to_domain()

        try:
            async with db.begin():
                stored = await self._repo.append(event, db)
        except (DBAPIError, *CONNECTION_ERRORS) as exc:
            raise_translated(
                exc,
                {FK_MAKER_EVENTS_MARKET: lambda: UnknownMarketError(event.market_id)},
            )

        logger.info(
            "Maker event recorded: market_id=%s order_id=%s %s %s size=%s price=%s",
            stored.market_id,
            stored.market_order_id,
            stored.side.value,
            stored.event_type.value,
            stored.size,
            stored.price,
        )
        return stored
