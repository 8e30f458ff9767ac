"""Services composing the account registry and the notification dispatcher."""

from bank_core.services.transactions import TransactionOutcome, TransactionProcessor

__all__ = ["TransactionOutcome", "TransactionProcessor"]
