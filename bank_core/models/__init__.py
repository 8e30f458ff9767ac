"""Domain models for accounts and notifications."""

from bank_core.models.account import (
    Account,
    FixedDepositAccount,
    HighYieldSavingsAccount,
    MoneyMarketAccount,
    SavingsAccount,
)
from bank_core.models.enums import AccountKind, ChannelType, DeliveryStatus, WithdrawalStatus
from bank_core.models.notification import Notification
from bank_core.models.results import (
    DeliveryResult,
    DispatchReport,
    InterestLine,
    WithdrawalResult,
)

__all__ = [
    "Account",
    "AccountKind",
    "ChannelType",
    "DeliveryResult",
    "DeliveryStatus",
    "DispatchReport",
    "FixedDepositAccount",
    "HighYieldSavingsAccount",
    "InterestLine",
    "MoneyMarketAccount",
    "Notification",
    "SavingsAccount",
    "WithdrawalResult",
    "WithdrawalStatus",
]
