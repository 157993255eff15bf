"""Shared test fixtures."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


class FakeTransaction:
    """Stands in for AsyncSessionTransaction: records commit vs rollback."""

    def __init__(self) -> None:
        self.committed = False
        self.rolled_back = False

    async def __aenter__(self) -> "FakeTransaction":
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> bool:
        if exc_type is None:
            self.committed = True
        else:
            self.rolled_back = True
        return False


def make_result(row: Any) -> MagicMock:
    """Mock CursorResult whose .one() yields `row`."""
    result = MagicMock()
    result.one.return_value = row
    return result


@pytest.fixture
def transaction() -> FakeTransaction:
    return FakeTransaction()


@pytest.fixture
def db(transaction: FakeTransaction) -> MagicMock:
    """Mock AsyncSession: begin() is an async context manager, execute() is awaited."""
    session = MagicMock()
    session.begin = MagicMock(return_value=transaction)
    session.execute = AsyncMock()
    return session
