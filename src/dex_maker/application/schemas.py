# src/dex_maker/application/schemas.py
from decimal import Decimal
from typing import Any

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from src.dex_common.datetime_utils import to_utc
from src.dex_common.enums import MakerEventType, Side, parse_enum
from src.dex_common.errors import InvalidInputError
from src.dex_maker.domain.models import MakerEvent


class RecordMakerEventRequest(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    market_id: int = Field(..., ge=0)
    side: Side
    market_order_id: int = Field(..., ge=0)
    user_address: str = Field(..., min_length=1)
    custodian_id: int | None = Field(default=None, ge=0)
    event_type: MakerEventType
    size: Decimal = Field(..., allow_inf_nan=False)
    price: Decimal = Field(..., allow_inf_nan=False)
    time: AwareDatetime

    @field_validator("side", "event_type", mode="before")
    @classmethod
    def exact_enum_value(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept a member or its exact value ("BUY", "PLACE"); nothing else."""
        enum_cls = Side if info.field_name == "side" else MakerEventType
        try:
            return parse_enum(enum_cls, v)
        except InvalidInputError as exc:
            allowed = ", ".join(m.value for m in enum_cls)
            raise ValueError(f"must be one of {allowed}") from exc

    def to_domain(self) -> MakerEvent:
        return MakerEvent(
            market_id=self.market_id,
            side=self.side,
            market_order_id=self.market_order_id,
            user_address=self.user_address,
            custodian_id=self.custodian_id,
            event_type=self.event_type,
            size=self.size,
            price=self.price,
            time=to_utc(self.time),
        )
