"""Custom exception hierarchy for bank-core."""

from decimal import Decimal
from typing import Any


class BankCoreError(Exception):
    """Base exception for all bank-core errors."""


class InvalidAmountError(BankCoreError):
    """Raised when an amount is non-positive or cannot be read as a number."""

    def __init__(self, value: Any, reason: str = "amount must be a positive number") -> None:
        self.value = value
        super().__init__(f"Invalid amount {value!r}: {reason}")


class WithdrawalDeniedError(BankCoreError):
    """Raised when an account policy rejects a withdrawal.

    Carries the attempted amount and the limit the account would have
    accepted at the time of the request.
    """

    def __init__(self, amount: Decimal, limit: Decimal, kind: str | None = None) -> None:
        self.amount = amount
        self.limit = limit
        self.kind = kind
        label = f" from {kind}" if kind else ""
        super().__init__(
            f"Cannot withdraw ${amount:.2f}{label}; withdrawal limit is ${limit:.2f}"
        )


class DeliveryFailedError(BankCoreError):
    """Raised by a channel that could not deliver a notification."""

    def __init__(self, channel: str, recipient: str, reason: str) -> None:
        self.channel = channel
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"{channel} delivery to {recipient} failed: {reason}")


class ConstructionError(BankCoreError):
    """Raised when an object is built from an invalid identifier or value."""


class ConfigurationError(BankCoreError):
    """Raised when configuration is invalid or names an unknown type."""
