"""Enumeration types for accounts and notifications."""

from enum import Enum


class AccountKind(str, Enum):
    SAVINGS = "Savings"
    MONEY_MARKET = "Money Market"
    FIXED_DEPOSIT = "Fixed Deposit"
    HIGH_YIELD_SAVINGS = "High Yield Savings"


class ChannelType(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    WHATSAPP = "whatsapp"


class WithdrawalStatus(str, Enum):
    COMPLETED = "COMPLETED"
    DENIED = "DENIED"


class DeliveryStatus(str, Enum):
    DELIVERED = "DELIVERED"
    FAILED = "FAILED"
