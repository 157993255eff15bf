# src/dex_maker/domain/repository.py
"""Repository Protocol for the maker event log. Append only: no update, no delete."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_maker.domain.models import MakerEvent


class MakerEventRepositoryProtocol(Protocol):
    async def append(self, event: MakerEvent, db: AsyncSession) -> MakerEvent: ...
