"""Bundled notification channels.

None of these talk to a real provider: they render the message for their
medium and log it. Swapping one for a provider-backed channel only means
overriding ``deliver``.
"""

import logging
from typing import ClassVar

from bank_core.exceptions import ConstructionError
from bank_core.models.enums import ChannelType
from bank_core.models.notification import Notification
from bank_core.notifications.base import NotificationChannel

logger = logging.getLogger(__name__)

DEFAULT_EMAIL_SENDER = "no-reply@bank.example"
DEFAULT_EMAIL_SUBJECT = "Account notification"


def _require(value: str, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConstructionError(f"{what} must be a non-empty string, got {value!r}")
    return value


class EmailChannel(NotificationChannel):
    """Email channel.

    Parameters
    ----------
    from_address : str
        Sender address shown on every message.
    subject : str
        Subject line used for every message.
    """

    channel_type: ClassVar[ChannelType] = ChannelType.EMAIL

    def __init__(
        self,
        from_address: str = DEFAULT_EMAIL_SENDER,
        subject: str = DEFAULT_EMAIL_SUBJECT,
    ) -> None:
        super().__init__()
        self.from_address = _require(from_address, "Email sender address")
        self.subject = _require(subject, "Email subject")

    def render(self, notification: Notification) -> str:
        return (
            f"[EMAIL] From: {self.from_address} | To: {notification.recipient} | "
            f"Subject: {self.subject} | {notification.message}"
        )


class SmsChannel(NotificationChannel):
    """SMS channel. Longer messages are sent but logged with a warning."""

    channel_type: ClassVar[ChannelType] = ChannelType.SMS

    MAX_LENGTH = 160

    def __init__(self, max_length: int = MAX_LENGTH) -> None:
        super().__init__()
        if max_length <= 0:
            raise ConstructionError(f"SMS max length must be positive, got {max_length}")
        self.max_length = max_length

    def render(self, notification: Notification) -> str:
        if len(notification.message) > self.max_length:
            logger.warning(
                "SMS message length (%d) exceeds %d chars, may be split into multiple messages",
                len(notification.message),
                self.max_length,
            )
        return f"[SMS] To: {notification.recipient} | Message: {notification.message}"


class PushChannel(NotificationChannel):
    """Mobile push channel."""

    channel_type: ClassVar[ChannelType] = ChannelType.PUSH

    def __init__(self, app_name: str = "Bank") -> None:
        super().__init__()
        self.app_name = _require(app_name, "Push app name")

    def render(self, notification: Notification) -> str:
        return f"[PUSH] {self.app_name} -> {notification.recipient}: {notification.message}"


class WhatsAppChannel(NotificationChannel):
    channel_type: ClassVar[ChannelType] = ChannelType.WHATSAPP

    def render(self, notification: Notification) -> str:
        return f"[WHATSAPP] To: {notification.recipient} | {notification.message}"
