"""Outcome types returned by the registry, the dispatcher and the processor."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from bank_core.models.enums import ChannelType, DeliveryStatus, WithdrawalStatus

if TYPE_CHECKING:
    from bank_core.models.account import Account


@dataclass(frozen=True)
class InterestLine:
    """One row of an interest report."""

    account: "Account"
    interest: Decimal


@dataclass(frozen=True)
class WithdrawalResult:
    """Outcome of a withdrawal attempt.

    ``balance`` is the balance after the attempt and ``limit`` the limit
    the account reported when it refused. ``limit`` is ``None`` for
    completed withdrawals.
    """

    account: "Account"
    amount: Decimal
    status: WithdrawalStatus
    balance: Decimal
    limit: Decimal | None = None
    reason: str | None = None

    @property
    def success(self) -> bool:
        return self.status is WithdrawalStatus.COMPLETED


@dataclass(frozen=True)
class DeliveryResult:
    """Result of sending one notification through one channel."""

    channel: ChannelType | str
    recipient: str
    message: str
    status: DeliveryStatus
    rendered: str | None = None
    error: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def success(self) -> bool:
        return self.status is DeliveryStatus.DELIVERED

    def __str__(self) -> str:
        mark = "✓" if self.success else "✗"
        label = self.channel.value if isinstance(self.channel, ChannelType) else self.channel
        detail = self.rendered if self.success else self.error
        return f"{mark} {label.upper()} to {self.recipient}: {detail}"


@dataclass(frozen=True)
class DispatchReport:
    """Per-channel outcomes of one dispatch, in delivery order."""

    recipient: str
    message: str
    results: tuple[DeliveryResult, ...] = ()

    @property
    def succeeded(self) -> list[DeliveryResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[DeliveryResult]:
        return [r for r in self.results if not r.success]

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def all_delivered(self) -> bool:
        return all(r.success for r in self.results)
