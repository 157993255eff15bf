"""Boundary validation: pydantic errors become InvalidInputError."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.dex_common.errors import InvalidInputError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_request(model_cls: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    try:
        return model_cls.model_validate(dict(data))
    except ValidationError as exc:
        # Values are left out of the message; only field paths and reasons.
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or model_cls.__name__}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidInputError(detail) from exc
