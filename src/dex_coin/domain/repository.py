# src/dex_coin/domain/repository.py
"""Repository Protocol: dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_coin.domain.models import Coin, NewCoin


class CoinRepositoryProtocol(Protocol):
    async def insert(self, coin: NewCoin, db: AsyncSession) -> Coin: ...
