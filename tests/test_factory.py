"""Tests for the composition root."""

from decimal import Decimal

import pytest

from bank_core.config import NotificationConfig
from bank_core.exceptions import ConfigurationError
from bank_core.factory import (
    ACCOUNT_TYPES,
    build_channel,
    build_dispatcher,
    open_account,
    resolve_account_kind,
)
from bank_core.models.account import FixedDepositAccount, MoneyMarketAccount
from bank_core.models.enums import AccountKind, ChannelType
from bank_core.notifications.channels import EmailChannel, PushChannel, SmsChannel, WhatsAppChannel


class TestOpenAccount:
    """Tests for open_account."""

    @pytest.mark.parametrize("kind", [AccountKind.MONEY_MARKET, "Money Market", "money_market", "MONEY_MARKET"])
    def test_kind_spellings(self, kind: object) -> None:
        account = open_account(kind, "Bob", "10000")  # type: ignore[arg-type]

        assert isinstance(account, MoneyMarketAccount)
        assert account.balance == Decimal("10000")

    def test_options_forwarded(self) -> None:
        account = open_account("Fixed Deposit", "Carol", 20000, lock_in_months=24)

        assert isinstance(account, FixedDepositAccount)
        assert account.lock_in_months == 24

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_account_kind("Checking")

    def test_every_kind_has_a_class(self) -> None:
        assert set(ACCOUNT_TYPES) == set(AccountKind)
        for kind, account_cls in ACCOUNT_TYPES.items():
            assert account_cls.kind is kind


class TestBuildChannel:
    """Tests for build_channel and build_dispatcher."""

    @pytest.mark.parametrize(
        ("name", "channel_cls"),
        [
            ("email", EmailChannel),
            ("SMS", SmsChannel),
            (" push ", PushChannel),
            (ChannelType.WHATSAPP, WhatsAppChannel),
        ],
    )
    def test_build_channel(self, name: object, channel_cls: type) -> None:
        assert isinstance(build_channel(name), channel_cls)  # type: ignore[arg-type]

    def test_config_applied(self) -> None:
        config = NotificationConfig(email_sender="alerts@bank.example", sms_max_length=70, push_app_name="Pocket")

        email = build_channel("email", config)
        sms = build_channel("sms", config)
        push = build_channel("push", config)

        assert isinstance(email, EmailChannel) and email.from_address == "alerts@bank.example"
        assert isinstance(sms, SmsChannel) and sms.max_length == 70
        assert isinstance(push, PushChannel) and push.app_name == "Pocket"

    def test_unknown_channel(self) -> None:
        with pytest.raises(ConfigurationError):
            build_channel("pager")

    def test_dispatcher_in_configured_order(self) -> None:
        dispatcher = build_dispatcher(NotificationConfig(channels=["whatsapp", "email", "push"]))

        assert [channel.name for channel in dispatcher.channels] == ["whatsapp", "email", "push"]

    def test_default_dispatcher(self) -> None:
        dispatcher = build_dispatcher()

        assert [type(channel) for channel in dispatcher.channels] == [EmailChannel, SmsChannel]
