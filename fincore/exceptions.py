"""Custom exception hierarchy for fincore."""

from decimal import Decimal


class FinCoreError(Exception):
    """Base exception for all fincore errors."""


class InvalidAmountError(FinCoreError, ValueError):
    """Raised when a deposit or withdrawal amount is not positive."""

    def __init__(self, amount: Decimal) -> None:
        super().__init__(f"Amount must be positive, got {amount}")
        self.amount = amount


class InsufficientFundsError(FinCoreError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, requested: Decimal, available: Decimal) -> None:
        super().__init__(
            f"Insufficient funds: requested ${requested:.2f}, available ${available:.2f}"
        )
        self.requested = requested
        self.available = available


class InvalidAccountTypeError(FinCoreError):
    """Raised when an operation does not apply to the account's type."""


class EntityNotFoundError(FinCoreError):
    """Raised when a referenced entity does not exist."""


class DuplicateIdentifierError(FinCoreError):
    """Raised when an identifier is already registered."""


class ConfigurationError(FinCoreError):
    """Raised when configuration is invalid or missing."""
