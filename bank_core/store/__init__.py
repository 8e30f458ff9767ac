"""In-memory stores for accounts."""

from bank_core.store.accounts import AccountRegistry

__all__ = ["AccountRegistry"]
