"""Configuration management for bank-core."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from bank_core.exceptions import ConfigurationError
from bank_core.notifications.channels import DEFAULT_EMAIL_SENDER, SmsChannel


@dataclass
class NotificationConfig:
    """Which channels the dispatcher gets, in delivery order."""

    channels: list[str] = field(default_factory=lambda: ["email", "sms"])
    email_sender: str = DEFAULT_EMAIL_SENDER
    sms_max_length: int = SmsChannel.MAX_LENGTH
    push_app_name: str = "Bank"


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class PortfolioConfig:
    """Sample portfolio generation."""

    num_accounts: int = 10
    locale: str = "en_US"


@dataclass
class BankCoreConfig:
    """Main configuration for bank-core."""

    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    portfolio: PortfolioConfig = field(default_factory=PortfolioConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankCoreConfig":
        """Create config from environment variables."""
        channels_str = os.getenv("NOTIFY_CHANNELS")
        channels = (
            [name.strip().lower() for name in channels_str.split(",") if name.strip()]
            if channels_str
            else ["email", "sms"]
        )

        notifications = NotificationConfig(
            channels=channels,
            email_sender=os.getenv("EMAIL_SENDER", DEFAULT_EMAIL_SENDER),
            sms_max_length=_int_env("SMS_MAX_LENGTH", SmsChannel.MAX_LENGTH),
            push_app_name=os.getenv("PUSH_APP_NAME", "Bank"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        portfolio = PortfolioConfig(
            num_accounts=_int_env("NUM_ACCOUNTS", 10),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )

        return cls(
            notifications=notifications,
            output=output,
            portfolio=portfolio,
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
