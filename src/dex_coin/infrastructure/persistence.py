# src/dex_coin/infrastructure/persistence.py
"""CoinRepository: raw SQL persistence implementation."""
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.dex_coin.domain.models import Coin, NewCoin

# ---------------------------------------------------------------------------
# SQL statements
# ---------------------------------------------------------------------------

_INSERT_COIN_SQL = text("""
    INSERT INTO coins (account_address, module_name, struct_name,
        symbol, name, decimals)
    VALUES (:account_address, :module_name, :struct_name,
        :symbol, :name, :decimals)
    RETURNING id, account_address, module_name, struct_name,
        symbol, name, decimals
""")

# Constraint names from alembic/versions/002_create_coins.py
UQ_COINS_IDENTITY = "uq_coins_identity"


# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------


def _row_to_coin(row: Any) -> Coin:
    return Coin(
        id=row.id,
        account_address=row.account_address,
        module_name=row.module_name,
        struct_name=row.struct_name,
        symbol=row.symbol,
        name=row.name,
        decimals=row.decimals,
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class CoinRepository:
    """Concrete implementation of CoinRepositoryProtocol using raw SQL."""

    async def insert(self, coin: NewCoin, db: AsyncSession) -> Coin:
        """Insert one row into coins within the caller's transaction."""
        result = await db.execute(
            _INSERT_COIN_SQL,
            {
                "account_address": coin.account_address,
                "module_name": coin.module_name,
                "struct_name": coin.struct_name,
                "symbol": coin.symbol,
                "name": coin.name,
                "decimals": coin.decimals,
            },
        )
        return _row_to_coin(result.one())
