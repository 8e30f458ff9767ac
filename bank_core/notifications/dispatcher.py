"""Fan-out of one notification to every configured channel."""

import logging
from typing import Iterable

from bank_core.exceptions import DeliveryFailedError
from bank_core.models.enums import DeliveryStatus
from bank_core.models.notification import Notification
from bank_core.models.results import DeliveryResult, DispatchReport
from bank_core.notifications.base import NotificationChannel

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Send the same notification through every registered channel.

    Channels are tried in registration order. A failing channel never stops
    the others: its failure is recorded in the report next to the
    successful deliveries.
    """

    def __init__(self, channels: Iterable[NotificationChannel] | None = None) -> None:
        self._channels: list[NotificationChannel] = list(channels or ())

    @property
    def channels(self) -> tuple[NotificationChannel, ...]:
        return tuple(self._channels)

    def add_channel(self, channel: NotificationChannel) -> None:
        self._channels.append(channel)

    def remove_channel(self, channel: NotificationChannel) -> None:
        """Remove ``channel``. Raises ``ValueError`` if it is not registered."""
        index = self._index_of(channel)
        del self._channels[index]

    def replace_channel(self, old: NotificationChannel, new: NotificationChannel) -> None:
        """Put ``new`` in the delivery slot held by ``old``."""
        index = self._index_of(old)
        self._channels[index] = new

    def dispatch(self, recipient: str, message: str) -> DispatchReport:
        """Deliver ``message`` to ``recipient`` on all channels.

        Parameters
        ----------
        recipient : str
            Already-resolved recipient handle.
        message : str
            Message body.

        Returns
        -------
        DispatchReport
            One result per channel, in delivery order.

        Raises
        ------
        ConstructionError
            If the recipient or message is empty; no channel is called.
        """
        notification = Notification(recipient, message)
        results = [self._send_one(channel, notification) for channel in self._channels]

        report = DispatchReport(
            recipient=notification.recipient,
            message=notification.message,
            results=tuple(results),
        )
        logger.info(
            "Dispatched to %s via %d channel(s), %d failed",
            notification.recipient,
            len(results),
            report.failure_count,
        )
        return report

    def _send_one(self, channel: NotificationChannel, notification: Notification) -> DeliveryResult:
        context = {"channel": channel.name, "recipient": notification.recipient}
        try:
            result = channel.send(notification.recipient, notification.message)
        except DeliveryFailedError as exc:
            logger.warning("%s", exc, extra=context)
            error = exc.reason
        except Exception as exc:
            logger.exception(
                "Channel %s raised while sending to %s",
                channel.name,
                notification.recipient,
                extra=context,
            )
            error = f"{type(exc).__name__}: {exc}"
        else:
            if not result.success:
                logger.warning(
                    "%s delivery to %s failed: %s",
                    channel.name,
                    notification.recipient,
                    result.error,
                    extra=context,
                )
            return result

        return DeliveryResult(
            channel=channel.channel_type,
            recipient=notification.recipient,
            message=notification.message,
            status=DeliveryStatus.FAILED,
            error=error,
        )

    def _index_of(self, channel: NotificationChannel) -> int:
        for index, held in enumerate(self._channels):
            if held is channel:
                return index
        raise ValueError(f"{channel!r} is not registered with this dispatcher")

    def __len__(self) -> int:
        return len(self._channels)
