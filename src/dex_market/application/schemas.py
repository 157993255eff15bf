# src/dex_market/application/schemas.py
from decimal import Decimal
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

from src.dex_common.datetime_utils import to_utc
from src.dex_market.domain.models import GenericBase, NewMarketRegistration, RegisteredBase


class RegisterMarketRequest(BaseModel):
    """Strict: ids must be int, sizes must be Decimal (float is rejected)."""

    model_config = ConfigDict(strict=True, frozen=True)

    market_id: int = Field(..., ge=0)
    time: AwareDatetime
    base: RegisteredBase | GenericBase
    quote_id: int = Field(..., ge=0)
    lot_size: Decimal = Field(..., allow_inf_nan=False)
    tick_size: Decimal = Field(..., allow_inf_nan=False)
    min_size: Decimal = Field(..., allow_inf_nan=False)
    underwriter_id: int = Field(..., ge=0)

    @field_validator("base", mode="before")
    @classmethod
    def base_is_tagged_variant(cls, v: Any) -> Any:
        """Only the two variants are accepted; a dict or a bare id is not."""
        if isinstance(v, RegisteredBase):
            if isinstance(v.coin_id, bool) or not isinstance(v.coin_id, int) or v.coin_id < 0:
                raise ValueError("RegisteredBase.coin_id must be a non-negative int")
        elif isinstance(v, GenericBase):
            if not isinstance(v.name, str) or not v.name:
                raise ValueError("GenericBase.name must be a non-empty string")
        else:
            raise ValueError("base must be RegisteredBase or GenericBase")
        return v

    def to_domain(self) -> NewMarketRegistration:
        return NewMarketRegistration(
            market_id=self.market_id,
            time=to_utc(self.time),
            base=self.base,
            quote_id=self.quote_id,
            lot_size=self.lot_size,
            tick_size=self.tick_size,
            min_size=self.min_size,
            underwriter_id=self.underwriter_id,
        )
