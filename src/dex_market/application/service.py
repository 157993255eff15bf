"""MarketRegistryService: one registration per market, never overwritten.

The caller resolves coin type tags to coin ids beforehand; this service only
checks that the ids are well formed. Referential integrity is the database's
job (foreign keys on base_id and quote_id).
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_common.db_errors import CONNECTION_ERRORS, raise_translated
from src.dex_common.errors import DuplicateMarketError, UnknownCoinError
from src.dex_common.validation import validate_request
from src.dex_market.application.schemas import RegisterMarketRequest
from src.dex_market.domain.models import BaseAsset, MarketRegistrationEvent
from src.dex_market.domain.repository import MarketRepositoryProtocol
from src.dex_market.infrastructure.persistence import (
    FK_MARKET_BASE_COIN,
    FK_MARKET_QUOTE_COIN,
    PK_MARKET_REGISTRATION_EVENTS,
    MarketRepository,
)

logger = logging.getLogger(__name__)


class MarketRegistryService:
    def __init__(self, repo: MarketRepositoryProtocol | None = None) -> None:
        self._repo: MarketRepositoryProtocol = repo or MarketRepository()

    async def register_market(
        self,
        db: AsyncSession,
        *,
        market_id: int,
        time: datetime,
        base: BaseAsset,
        quote_id: int,
        lot_size: Decimal,
        tick_size: Decimal,
        min_size: Decimal,
        underwriter_id: int,
    ) -> MarketRegistrationEvent:
        request = validate_request(
            RegisterMarketRequest,
            {
                "market_id": market_id,
                "time": time,
                "base": base,
                "quote_id": quote_id,
                "lot_size": lot_size,
                "tick_size": tick_size,
                "min_size": min_size,
                "underwriter_id": underwriter_id,
            },
        )
        registration = request.to_domain()

        try:
            async with db.begin():
                market = await self._repo.insert(registration, db)
        except (DBAPIError, *CONNECTION_ERRORS) as exc:
            raise_translated(
                exc,
                {
                    PK_MARKET_REGISTRATION_EVENTS: lambda: DuplicateMarketError(
                        registration.market_id
                    ),
                    FK_MARKET_BASE_COIN: lambda: UnknownCoinError(
                        f"base {registration.base}"
                    ),
                    FK_MARKET_QUOTE_COIN: lambda: UnknownCoinError(
                        f"quote id {registration.quote_id}"
                    ),
                },
            )

        logger.info(
            "Market registered: market_id=%s base=%s quote_id=%s",
            market.market_id,
            market.base,
            market.quote_id,
        )
        return market
