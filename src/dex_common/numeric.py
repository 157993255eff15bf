"""Arbitrary-precision numeric contracts for quantities crossing the DB boundary.

Ids are Python ints, sizes and prices are Decimal. Both travel through
PostgreSQL NUMERIC columns, which asyncpg encodes from Decimal only.
No float anywhere on this path.
"""

from decimal import Decimal

from src.dex_common.errors import InvalidInputError


def int_to_numeric(value: int) -> Decimal:
    """Bind an arbitrary-precision integer to a NUMERIC parameter."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"expected int, got {type(value).__name__}")
    return Decimal(value)


def optional_int_to_numeric(value: int | None) -> Decimal | None:
    return None if value is None else int_to_numeric(value)


def numeric_to_int(value: Decimal | int) -> int:
    """Read an integral NUMERIC column back as int, refusing fractional values."""
    if isinstance(value, bool):
        raise InvalidInputError("expected integral numeric, got bool")
    if isinstance(value, int):
        return value
    if not isinstance(value, Decimal) or not value.is_finite():
        raise InvalidInputError(f"expected integral numeric, got {value!r}")
    if value != value.to_integral_value():
        raise InvalidInputError(f"expected integral numeric, got {value}")
    return int(value)


def optional_numeric_to_int(value: Decimal | int | None) -> int | None:
    return None if value is None else numeric_to_int(value)


def check_decimal(value: Decimal) -> Decimal:
    """Pass a finite Decimal through unchanged; anything else is rejected."""
    if not isinstance(value, Decimal):
        raise InvalidInputError(f"expected Decimal, got {type(value).__name__}")
    if not value.is_finite():
        raise InvalidInputError(f"expected finite Decimal, got {value}")
    return value
