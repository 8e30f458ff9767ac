"""Notification channel contract."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from bank_core.models.enums import ChannelType, DeliveryStatus
from bank_core.models.notification import Notification
from bank_core.models.results import DeliveryResult

logger = logging.getLogger(__name__)


class NotificationChannel(ABC):
    """A way of delivering a message to a recipient.

    Subclasses decide how a message looks on their medium (``render``) and,
    for channels backed by a real transport, how it is handed over
    (``deliver``). A channel that cannot deliver raises
    ``DeliveryFailedError`` from ``deliver``; the dispatcher records it and
    carries on with the other channels.

    Every successful send is kept in ``sent_messages``.
    """

    channel_type: ClassVar[ChannelType | str]

    def __init__(self) -> None:
        self.sent_messages: list[DeliveryResult] = []

    @property
    def name(self) -> str:
        kind = self.channel_type
        return kind.value if isinstance(kind, Enum) else str(kind)

    @abstractmethod
    def render(self, notification: Notification) -> str:
        """Format the notification the way this channel shows it."""

    def deliver(self, notification: Notification, rendered: str) -> None:
        """Hand the rendered message to the transport."""
        logger.info("%s", rendered)

    def send(self, recipient: str, message: str) -> DeliveryResult:
        """Send ``message`` to ``recipient``.

        Raises
        ------
        ConstructionError
            If the recipient or message is empty.
        DeliveryFailedError
            If the channel could not deliver.
        """
        notification = Notification(recipient, message)
        rendered = self.render(notification)
        self.deliver(notification, rendered)

        result = DeliveryResult(
            channel=self.channel_type,
            recipient=notification.recipient,
            message=notification.message,
            status=DeliveryStatus.DELIVERED,
            rendered=rendered,
        )
        self.sent_messages.append(result)
        return result

    def get_sent_count(self) -> int:
        return len(self.sent_messages)

    def find_message_to(self, recipient: str) -> DeliveryResult | None:
        """Find the first message sent to ``recipient``."""
        for result in self.sent_messages:
            if result.recipient == recipient:
                return result
        return None

    def clear_history(self) -> None:
        self.sent_messages.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sent={len(self.sent_messages)})"
