"""Notification channels and the dispatcher that fans out to them."""

from bank_core.notifications.base import NotificationChannel
from bank_core.notifications.channels import (
    EmailChannel,
    PushChannel,
    SmsChannel,
    WhatsAppChannel,
)
from bank_core.notifications.dispatcher import NotificationDispatcher

__all__ = [
    "EmailChannel",
    "NotificationChannel",
    "NotificationDispatcher",
    "PushChannel",
    "SmsChannel",
    "WhatsAppChannel",
]
