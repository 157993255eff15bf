"""Translate driver exceptions into the AppError taxonomy.

Classification is by PostgreSQL SQLSTATE, then by constraint name. The
constraint names are the ones declared in alembic/versions/.
"""

import logging
import re
from collections.abc import Callable, Mapping
from typing import NoReturn

import asyncpg
from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)

from src.dex_common.errors import (
    AppError,
    ConnectionFailedError,
    ConstraintViolationError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"
NOT_NULL_VIOLATION = "23502"

# Raised by the driver while connecting, before SQLAlchemy can wrap them.
CONNECTION_ERRORS: tuple[type[BaseException], ...] = (
    OSError,
    asyncpg.PostgresConnectionError,
    asyncpg.InvalidAuthorizationSpecificationError,
    asyncpg.InvalidCatalogNameError,
)

ConstraintErrorFactory = Callable[[], AppError]

_CONSTRAINT_IN_MESSAGE = re.compile(r'constraint "([^"]+)"')


def _candidates(exc: BaseException) -> list[object]:
    orig = exc.orig if isinstance(exc, DBAPIError) else exc
    return [c for c in (orig, getattr(orig, "__cause__", None)) if c is not None]


def sqlstate_of(exc: BaseException) -> str | None:
    for candidate in _candidates(exc):
        for attr in ("sqlstate", "pgcode"):
            code = getattr(candidate, attr, None)
            if isinstance(code, str) and code:
                return code
    return None


def constraint_name_of(exc: BaseException) -> str | None:
    for candidate in _candidates(exc):
        name = getattr(candidate, "constraint_name", None)
        if isinstance(name, str) and name:
            return name
        diag = getattr(candidate, "diag", None)
        name = getattr(diag, "constraint_name", None)
        if isinstance(name, str) and name:
            return name
    for candidate in _candidates(exc):
        match = _CONSTRAINT_IN_MESSAGE.search(str(candidate))
        if match:
            return match.group(1)
    return None


def translate_db_error(
    exc: BaseException,
    constraint_errors: Mapping[str, ConstraintErrorFactory],
) -> AppError | None:
    """Map a driver exception to an AppError, or None if it is not classifiable."""
    sqlstate = sqlstate_of(exc)

    if sqlstate is not None and sqlstate.startswith("23"):
        name = constraint_name_of(exc)
        if name is not None and name in constraint_errors:
            return constraint_errors[name]()
        if sqlstate in (CHECK_VIOLATION, NOT_NULL_VIOLATION):
            return InvalidInputError(f"violates {name or 'a column constraint'}")
        return ConstraintViolationError(f"Constraint violated: {name or sqlstate}")

    if isinstance(exc, DataError) or (sqlstate is not None and sqlstate.startswith("22")):
        return InvalidInputError(f"rejected by database (SQLSTATE {sqlstate or 'unknown'})")

    if isinstance(exc, IntegrityError):
        # No SQLSTATE from the driver; the constraint name may still be in the message.
        name = constraint_name_of(exc)
        if name is not None and name in constraint_errors:
            return constraint_errors[name]()
        return ConstraintViolationError(f"Constraint violated: {name or 'unknown'}")

    if isinstance(exc, (OperationalError, InterfaceError, *CONNECTION_ERRORS)):
        return ConnectionFailedError(f"Database unavailable: {type(exc).__name__}")

    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return ConnectionFailedError("Database connection was invalidated")

    return None


def raise_translated(
    exc: BaseException,
    constraint_errors: Mapping[str, ConstraintErrorFactory],
) -> NoReturn:
    """Re-raise `exc` as its AppError counterpart, chained; unknown errors propagate as-is."""
    error = translate_db_error(exc, constraint_errors)
    if error is None:
        raise exc
    if isinstance(error, ConstraintViolationError):
        logger.warning("Insert rejected: %s", error.message)
    raise error from exc
