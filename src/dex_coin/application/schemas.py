# src/dex_coin/application/schemas.py
"""Pydantic input schema for coin registration.

Strict mode: no str->int coercion, no float->int truncation.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.dex_coin.domain.models import NewCoin

SMALLINT_MAX = 32767


class RegisterCoinRequest(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    account_address: str = Field(..., min_length=1)
    module_name: str = Field(..., min_length=1)
    struct_name: str = Field(..., min_length=1)
    symbol: str | None = None
    name: str | None = None
    decimals: int | None = Field(default=None, ge=0, le=SMALLINT_MAX)

    def to_domain(self) -> NewCoin:
        return NewCoin(
            account_address=self.account_address,
            module_name=self.module_name,
            struct_name=self.struct_name,
            symbol=self.symbol,
            name=self.name,
            decimals=self.decimals,
        )
