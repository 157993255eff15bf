# src/dex_market/domain/repository.py
"""Repository Protocol: dependency inversion for testability."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_market.domain.models import MarketRegistrationEvent, NewMarketRegistration


class MarketRepositoryProtocol(Protocol):
    async def insert(
        self,
        registration: NewMarketRegistration,
        db: AsyncSession,
    ) -> MarketRegistrationEvent: ...
