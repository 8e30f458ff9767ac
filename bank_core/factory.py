"""Composition root: the one place concrete account and channel types are named."""

from typing import Any

from bank_core.config import NotificationConfig
from bank_core.exceptions import ConfigurationError
from bank_core.models.account import (
    Account,
    FixedDepositAccount,
    HighYieldSavingsAccount,
    MoneyMarketAccount,
    SavingsAccount,
)
from bank_core.models.enums import AccountKind, ChannelType
from bank_core.notifications.base import NotificationChannel
from bank_core.notifications.channels import (
    EmailChannel,
    PushChannel,
    SmsChannel,
    WhatsAppChannel,
)
from bank_core.notifications.dispatcher import NotificationDispatcher

ACCOUNT_TYPES: dict[AccountKind, type[Account]] = {
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.MONEY_MARKET: MoneyMarketAccount,
    AccountKind.FIXED_DEPOSIT: FixedDepositAccount,
    AccountKind.HIGH_YIELD_SAVINGS: HighYieldSavingsAccount,
}


def resolve_account_kind(kind: AccountKind | str) -> AccountKind:
    """Accept an ``AccountKind``, its value ("Money Market") or its name ("MONEY_MARKET")."""
    if isinstance(kind, AccountKind):
        return kind
    key = str(kind).strip()
    for candidate in AccountKind:
        if key.lower() in (candidate.value.lower(), candidate.name.lower()):
            return candidate
    raise ConfigurationError(f"Unknown account kind: {kind!r}")


def open_account(kind: AccountKind | str, holder: str, balance: Any, **options: Any) -> Account:
    """Create an account of the given kind.

    Extra keyword options go to the account class, e.g. ``lock_in_months``
    for fixed deposits.
    """
    account_cls = ACCOUNT_TYPES[resolve_account_kind(kind)]
    return account_cls(holder, balance, **options)


def build_channel(name: ChannelType | str, config: NotificationConfig | None = None) -> NotificationChannel:
    """Create the channel registered under ``name``."""
    config = config or NotificationConfig()
    try:
        channel_type = ChannelType(str(getattr(name, "value", name)).strip().lower())
    except ValueError as exc:
        raise ConfigurationError(f"Unknown notification channel: {name!r}") from exc

    if channel_type is ChannelType.EMAIL:
        return EmailChannel(from_address=config.email_sender)
    if channel_type is ChannelType.SMS:
        return SmsChannel(max_length=config.sms_max_length)
    if channel_type is ChannelType.PUSH:
        return PushChannel(app_name=config.push_app_name)
    return WhatsAppChannel()


def build_dispatcher(config: NotificationConfig | None = None) -> NotificationDispatcher:
    """Create a dispatcher with the configured channels, in configured order."""
    config = config or NotificationConfig()
    return NotificationDispatcher(build_channel(name, config) for name in config.channels)
