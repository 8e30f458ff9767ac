"""Notification value object."""

from dataclasses import dataclass

from bank_core.exceptions import ConstructionError


@dataclass(frozen=True)
class Notification:
    """A single logical message addressed to one recipient.

    The recipient is already resolved for the channels it will go through
    (an address, phone number or device handle); channels do not look it up.
    """

    recipient: str
    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.recipient, str) or not self.recipient.strip():
            raise ConstructionError(f"Recipient must be a non-empty string, got {self.recipient!r}")
        if not isinstance(self.message, str) or not self.message.strip():
            raise ConstructionError("Notification message must be a non-empty string")
