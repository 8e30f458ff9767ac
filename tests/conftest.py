"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from bank_core.models.account import (
    FixedDepositAccount,
    HighYieldSavingsAccount,
    MoneyMarketAccount,
    SavingsAccount,
)
from bank_core.notifications.channels import EmailChannel, SmsChannel
from bank_core.store.accounts import AccountRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def alice() -> SavingsAccount:
    """Savings account for Alice with 5000."""
    return SavingsAccount("Alice", Decimal("5000"))


@pytest.fixture
def bob() -> MoneyMarketAccount:
    """Money market account for Bob with 10000."""
    return MoneyMarketAccount("Bob", Decimal("10000"))


@pytest.fixture
def carol() -> FixedDepositAccount:
    """Fixed deposit for Carol with 20000, locked for 12 months."""
    return FixedDepositAccount("Carol", Decimal("20000"), 12)


@pytest.fixture
def david() -> HighYieldSavingsAccount:
    """High yield savings account for David with 15000."""
    return HighYieldSavingsAccount("David", Decimal("15000"))


@pytest.fixture
def registry(
    alice: SavingsAccount, bob: MoneyMarketAccount, carol: FixedDepositAccount
) -> AccountRegistry:
    """Registry holding Alice, Bob and Carol, in that order."""
    return AccountRegistry([alice, bob, carol])


@pytest.fixture
def email_channel() -> EmailChannel:
    """Fresh EmailChannel for each test."""
    return EmailChannel()


@pytest.fixture
def sms_channel() -> SmsChannel:
    """Fresh SmsChannel for each test."""
    return SmsChannel()
