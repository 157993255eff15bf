"""Tests for dex_common.db_errors: SQLSTATE / constraint-name classification."""

import pytest
from sqlalchemy.exc import DataError, IntegrityError, ProgrammingError

from src.dex_common.db_errors import (
    constraint_name_of,
    raise_translated,
    sqlstate_of,
    translate_db_error,
)
from src.dex_common.errors import (
    ConnectionFailedError,
    ConstraintViolationError,
    DuplicateMarketError,
    InvalidInputError,
)


class FakePgError(Exception):
    """Mimics the DBAPI error SQLAlchemy's asyncpg adapter puts in `.orig`."""

    def __init__(self, message: str, sqlstate: str | None = None) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity(message: str, sqlstate: str = "23505") -> IntegrityError:
    return IntegrityError("INSERT ...", {}, FakePgError(message, sqlstate))


_MARKET_ERRORS = {"pk_market_registration_events": lambda: DuplicateMarketError(1)}


class TestIntrospection:
    def test_sqlstate_from_orig(self) -> None:
        assert sqlstate_of(_integrity("boom", "23503")) == "23503"

    def test_sqlstate_from_driver_cause(self) -> None:
        driver_exc = FakePgError("fk", "23503")
        wrapper = FakePgError("wrapped")
        wrapper.__cause__ = driver_exc
        assert sqlstate_of(IntegrityError("INSERT", {}, wrapper)) == "23503"

    def test_constraint_name_attribute_wins(self) -> None:
        orig = FakePgError('violates unique constraint "other"', "23505")
        orig.constraint_name = "uq_coins_identity"  # type: ignore[attr-defined]
        assert constraint_name_of(IntegrityError("INSERT", {}, orig)) == "uq_coins_identity"

    def test_constraint_name_from_message(self) -> None:
        exc = _integrity('duplicate key value violates unique constraint "pk_market_registration_events"')
        assert constraint_name_of(exc) == "pk_market_registration_events"

    def test_no_constraint_name(self) -> None:
        assert constraint_name_of(_integrity("something else")) is None


class TestTranslate:
    def test_known_constraint_uses_factory(self) -> None:
        exc = _integrity('violates unique constraint "pk_market_registration_events"')
        assert isinstance(translate_db_error(exc, _MARKET_ERRORS), DuplicateMarketError)

    def test_unknown_unique_constraint_is_generic_violation(self) -> None:
        exc = _integrity('violates unique constraint "uq_something"')
        error = translate_db_error(exc, _MARKET_ERRORS)
        assert type(error) is ConstraintViolationError
        assert "uq_something" in error.message

    def test_check_violation_is_invalid_input(self) -> None:
        exc = _integrity('violates check constraint "ck_maker_events_size_price_gte_0"', "23514")
        error = translate_db_error(exc, {})
        assert isinstance(error, InvalidInputError)
        assert "ck_maker_events_size_price_gte_0" in error.message

    def test_data_error_is_invalid_input(self) -> None:
        exc = DataError("INSERT", {}, FakePgError("numeric field overflow", "22003"))
        assert isinstance(translate_db_error(exc, {}), InvalidInputError)

    def test_integrity_without_sqlstate(self) -> None:
        exc = IntegrityError("INSERT", {}, Exception("no code"))
        error = translate_db_error(exc, _MARKET_ERRORS)
        assert type(error) is ConstraintViolationError
        assert "unknown" in error.message

    def test_integrity_without_sqlstate_uses_constraint_name(self) -> None:
        exc = IntegrityError(
            "INSERT",
            {},
            Exception('duplicate key value violates unique constraint "pk_market_registration_events"'),
        )
        assert isinstance(translate_db_error(exc, _MARKET_ERRORS), DuplicateMarketError)

    def test_integrity_without_sqlstate_unmapped_name(self) -> None:
        exc = IntegrityError("INSERT", {}, Exception('violates foreign key constraint "fk_other"'))
        error = translate_db_error(exc, _MARKET_ERRORS)
        assert type(error) is ConstraintViolationError
        assert "fk_other" in error.message

    def test_os_error_is_connection_failure(self) -> None:
        assert isinstance(translate_db_error(ConnectionResetError(), {}), ConnectionFailedError)

    def test_unclassified_returns_none(self) -> None:
        exc = ProgrammingError("INSERT", {}, FakePgError('relation "coins" does not exist', "42P01"))
        assert translate_db_error(exc, {}) is None


class TestRaiseTranslated:
    def test_chains_original(self) -> None:
        exc = _integrity('violates unique constraint "pk_market_registration_events"')
        with pytest.raises(DuplicateMarketError) as exc_info:
            raise_translated(exc, _MARKET_ERRORS)
        assert exc_info.value.__cause__ is exc

    def test_unclassified_propagates_unchanged(self) -> None:
        exc = ProgrammingError("INSERT", {}, FakePgError("syntax error", "42601"))
        with pytest.raises(ProgrammingError) as exc_info:
            raise_translated(exc, {})
        assert exc_info.value is exc
