"""Tests for amount coercion."""

from decimal import Decimal

import pytest

from bank_core.exceptions import InvalidAmountError
from bank_core.money import positive_amount, quantize_cents, to_amount


class TestToAmount:
    """Tests for to_amount."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5000, Decimal("5000")),
            ("2000.50", Decimal("2000.50")),
            (" 12 ", Decimal("12")),
            (Decimal("0.01"), Decimal("0.01")),
            (0.1, Decimal("0.1")),
            (0, Decimal("0")),
        ],
    )
    def test_accepts_numeric_values(self, value: object, expected: Decimal) -> None:
        assert to_amount(value) == expected
        assert isinstance(to_amount(value), Decimal)

    @pytest.mark.parametrize(
        "value",
        [None, True, "abc", "", "NaN", "Infinity", Decimal("NaN"), float("inf"), [1], object()],
    )
    def test_rejects_malformed_values(self, value: object) -> None:
        with pytest.raises(InvalidAmountError):
            to_amount(value)


class TestPositiveAmount:
    """Tests for positive_amount."""

    def test_positive_passes(self) -> None:
        assert positive_amount("0.01") == Decimal("0.01")

    @pytest.mark.parametrize("value", [0, "0.00", -1, Decimal("-0.01")])
    def test_non_positive_rejected(self, value: object) -> None:
        with pytest.raises(InvalidAmountError):
            positive_amount(value)


def test_quantize_cents() -> None:
    assert quantize_cents(Decimal("9500.0000")) == Decimal("9500.00")
    assert str(quantize_cents(Decimal("200"))) == "200.00"
