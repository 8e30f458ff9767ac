"""Tests for custom exception hierarchy."""

from decimal import Decimal

import pytest

from bank_core.exceptions import (
    BankCoreError,
    ConfigurationError,
    ConstructionError,
    DeliveryFailedError,
    InvalidAmountError,
    WithdrawalDeniedError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidAmountError("-1"),
            WithdrawalDeniedError(Decimal("1"), Decimal("0")),
            DeliveryFailedError("sms", "+1555", "gateway down"),
            ConstructionError("bad holder"),
            ConfigurationError("bad channel"),
        ],
    )
    def test_all_errors_are_bank_core_errors(self, error: Exception) -> None:
        assert isinstance(error, BankCoreError)
        assert isinstance(error, Exception)

    def test_exception_message(self) -> None:
        err = ConstructionError("Account holder must be a non-empty string")
        assert str(err) == "Account holder must be a non-empty string"


class TestErrorPayloads:
    """Errors carry what callers need for diagnostics."""

    def test_withdrawal_denied_carries_amount_and_limit(self) -> None:
        err = WithdrawalDeniedError(Decimal("9600"), Decimal("9500.00"), kind="Money Market")

        assert err.amount == Decimal("9600")
        assert err.limit == Decimal("9500.00")
        assert err.kind == "Money Market"
        assert "$9600.00" in str(err)
        assert "$9500.00" in str(err)
        assert "Money Market" in str(err)

    def test_invalid_amount_keeps_value(self) -> None:
        err = InvalidAmountError("abc", "not a number")

        assert err.value == "abc"
        assert "not a number" in str(err)

    def test_delivery_failed_fields(self) -> None:
        err = DeliveryFailedError("sms", "+1-555-0100", "gateway down")

        assert err.channel == "sms"
        assert err.recipient == "+1-555-0100"
        assert err.reason == "gateway down"
        assert str(err) == "sms delivery to +1-555-0100 failed: gateway down"
