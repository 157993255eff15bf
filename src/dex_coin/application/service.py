"""CoinRegistryService: validate, insert, commit.

Each call runs in its own transaction (`async with db.begin()`), so the
session passed in must not already have one open.
"""

import logging

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_coin.application.schemas import RegisterCoinRequest
from src.dex_coin.domain.models import Coin
from src.dex_coin.domain.repository import CoinRepositoryProtocol
from src.dex_coin.infrastructure.persistence import UQ_COINS_IDENTITY, CoinRepository
from src.dex_common.db_errors import CONNECTION_ERRORS, raise_translated
from src.dex_common.errors import DuplicateCoinError
from src.dex_common.validation import validate_request

logger = logging.getLogger(__name__)


class CoinRegistryService:
    """Stateless service: instantiate once, reuse across calls."""

    def __init__(self, repo: CoinRepositoryProtocol | None = None) -> None:
        self._repo: CoinRepositoryProtocol = repo or CoinRepository()

    async def register_coin(
        self,
        db: AsyncSession,
        *,
        account_address: str,
        module_name: str,
        struct_name: str,
        symbol: str | None = None,
        name: str | None = None,
        decimals: int | None = None,
    ) -> Coin:
        """Record a coin the first time it is observed.

        No dedup: an identity that already exists raises DuplicateCoinError
        and leaves the stored row untouched.
        """
        request = validate_request(
            RegisterCoinRequest,
            {
                "account_address": account_address,
                "module_name": module_name,
                "struct_name": struct_name,
                "symbol": symbol,
                "name": name,
                "decimals": decimals,
            },
        )
        new_coin = request.to_domain()

        try:
            async with db.begin():
                coin = await self._repo.insert(new_coin, db)
        except (DBAPIError, *CONNECTION_ERRORS) as exc:
            raise_translated(
                exc,
                {
                    UQ_COINS_IDENTITY: lambda: DuplicateCoinError(
                        new_coin.account_address, new_coin.module_name, new_coin.struct_name
                    ),
                },
            )

        logger.info("Coin registered: id=%s type=%s", coin.id, coin.type_tag)
        return coin
