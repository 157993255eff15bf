"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Configuration
  2xxx: Connection
  3xxx: Constraint violation (duplicates, missing references)
  4xxx: Type/range violation
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Configuration ---

class ConfigurationError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, detail)


# --- 2xxx: Connection ---

class ConnectionFailedError(AppError):
    def __init__(self, detail: str = "Could not connect to database") -> None:
        super().__init__(2001, detail)


# --- 3xxx: Constraint violation ---

class ConstraintViolationError(AppError):
    def __init__(self, detail: str, code: int = 3000) -> None:
        super().__init__(code, detail)


class DuplicateCoinError(ConstraintViolationError):
    def __init__(self, account_address: str, module_name: str, struct_name: str) -> None:
        super().__init__(
            f"Coin already registered: {account_address}::{module_name}::{struct_name}",
            3001,
        )


class DuplicateMarketError(ConstraintViolationError):
    def __init__(self, market_id: int) -> None:
        super().__init__(f"Market already registered: {market_id}", 3002)


class UnknownMarketError(ConstraintViolationError):
    def __init__(self, market_id: int) -> None:
        super().__init__(f"Market not registered: {market_id}", 3003)


class UnknownCoinError(ConstraintViolationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Coin not registered: {detail}", 3004)


# --- 4xxx: Type/range violation ---

class InvalidInputError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Invalid input: {detail}")
