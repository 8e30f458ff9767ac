"""Decimal helpers for monetary amounts."""

from decimal import Decimal, InvalidOperation
from typing import Any

from bank_core.exceptions import InvalidAmountError

ZERO = Decimal("0")
CENTS = Decimal("0.01")


def to_amount(value: Any) -> Decimal:
    """Coerce ``value`` to a finite ``Decimal``.

    Ints, strings and Decimals are taken as-is. Floats go through ``str`` so
    that ``0.1`` becomes ``Decimal("0.1")`` and not its binary expansion.

    Raises
    ------
    InvalidAmountError
        If the value is a bool, ``None``, not numeric, NaN or infinite.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(value, "not a number")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, str)):
        try:
            amount = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation as exc:
            raise InvalidAmountError(value, "not a number") from exc
    elif isinstance(value, float):
        amount = Decimal(str(value))
    else:
        raise InvalidAmountError(value, f"unsupported type {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidAmountError(value, "must be finite")
    return amount


def positive_amount(value: Any) -> Decimal:
    """Coerce ``value`` and require it to be strictly positive."""
    amount = to_amount(value)
    if amount <= ZERO:
        raise InvalidAmountError(value)
    return amount


def quantize_cents(amount: Decimal) -> Decimal:
    """Round to two decimal places for display."""
    return amount.quantize(CENTS)
