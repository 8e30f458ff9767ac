"""Account contract and the bundled policy variants.

Every account answers the same questions: how much interest it earns in a
year, whether it would accept a withdrawal, and how much it would accept at
most. Consumers only ever ask those questions; they never look at the
concrete class or at ``kind``.

A new policy is a subclass that sets ``kind`` and ``interest_rate`` and
overrides ``withdrawal_limit`` (and ``can_withdraw`` when the rule is not a
plain ceiling).
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, Inexact, localcontext
from enum import Enum
from typing import Any, ClassVar

from bank_core.exceptions import ConstructionError, InvalidAmountError, WithdrawalDeniedError
from bank_core.models.enums import AccountKind
from bank_core.money import ZERO, positive_amount, to_amount

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Account(ABC):
    """Bank account with a fixed interest and withdrawal policy.

    Accounts compare by identity: two accounts for the same holder with the
    same balance are still two accounts.
    """

    kind: ClassVar[AccountKind | str]
    interest_rate: ClassVar[Decimal]

    holder: str
    balance: Decimal
    account_id: str = field(default_factory=lambda: uuid.uuid4().hex, kw_only=True)

    def __post_init__(self) -> None:
        if not isinstance(self.holder, str) or not self.holder.strip():
            raise ConstructionError(f"Account holder must be a non-empty string, got {self.holder!r}")
        try:
            balance = to_amount(self.balance)
        except InvalidAmountError as exc:
            raise ConstructionError(f"Invalid opening balance for {self.holder}: {exc}") from exc
        if balance < ZERO:
            raise ConstructionError(f"Opening balance for {self.holder} cannot be negative: {balance}")
        self.balance = balance

    @property
    def kind_label(self) -> str:
        """Display label for the account type."""
        return self.kind.value if isinstance(self.kind, Enum) else str(self.kind)

    def annual_interest(self) -> Decimal:
        """Interest earned over one year at the current balance."""
        return self.balance * self.interest_rate

    @abstractmethod
    def withdrawal_limit(self) -> Decimal:
        """Largest amount ``can_withdraw`` currently accepts."""

    def can_withdraw(self, amount: Any) -> bool:
        """Whether the policy would accept ``amount``.

        ``amount`` is coerced like any other money input, so malformed values
        raise ``InvalidAmountError`` instead of failing the comparison.
        """
        return to_amount(amount) <= self.withdrawal_limit()

    def withdraw(self, amount: Any) -> Decimal:
        """Withdraw ``amount`` and return the new balance.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not a positive number. Checked before the policy.
        WithdrawalDeniedError
            If the policy rejects the amount. The balance is left unchanged.

        The new balance is computed exactly; an amount whose subtraction would
        round raises ``InvalidAmountError`` and leaves the balance unchanged.
        """
        value = positive_amount(amount)
        if not self.can_withdraw(value):
            raise WithdrawalDeniedError(value, self.withdrawal_limit(), kind=self.kind_label)

        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            try:
                balance = self.balance - value
            except Inexact as exc:
                raise InvalidAmountError(
                    value, f"withdrawing it from {self.balance} needs more than {ctx.prec} digits"
                ) from exc

        self.balance = balance
        logger.info(
            "Withdrew %s from %s account %s; balance now %s",
            value,
            self.kind_label,
            self.account_id,
            self.balance,
            extra={"account_id": self.account_id, "holder": self.holder},
        )
        return self.balance

    def __str__(self) -> str:
        return f"{self.kind_label} | {self.holder} | Balance: ${self.balance:.2f}"


@dataclass(eq=False)
class SavingsAccount(Account):
    """Savings account: 4% a year, withdraw up to the full balance."""

    kind: ClassVar[AccountKind] = AccountKind.SAVINGS
    interest_rate: ClassVar[Decimal] = Decimal("0.04")

    def withdrawal_limit(self) -> Decimal:
        return self.balance


@dataclass(eq=False)
class MoneyMarketAccount(Account):
    """Money market account: 5% a year, 5% of the balance must stay put."""

    kind: ClassVar[AccountKind] = AccountKind.MONEY_MARKET
    interest_rate: ClassVar[Decimal] = Decimal("0.05")
    RESERVE_RATIO: ClassVar[Decimal] = Decimal("0.95")

    def withdrawal_limit(self) -> Decimal:
        return self.balance * self.RESERVE_RATIO


@dataclass(eq=False)
class FixedDepositAccount(Account):
    """Fixed deposit: 6% a year, no withdrawals before maturity.

    ``lock_in_months`` is informational; the account never becomes
    withdrawable inside this package.
    """

    kind: ClassVar[AccountKind] = AccountKind.FIXED_DEPOSIT
    interest_rate: ClassVar[Decimal] = Decimal("0.06")

    lock_in_months: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if (
            isinstance(self.lock_in_months, bool)
            or not isinstance(self.lock_in_months, int)
            or self.lock_in_months <= 0
        ):
            raise ConstructionError(
                f"Lock-in must be a positive number of months, got {self.lock_in_months!r}"
            )

    def withdrawal_limit(self) -> Decimal:
        return ZERO

    def can_withdraw(self, amount: Any) -> bool:
        to_amount(amount)
        return False

    def __str__(self) -> str:
        return f"{super().__str__()} | Locked for {self.lock_in_months} months"


@dataclass(eq=False)
class HighYieldSavingsAccount(Account):
    """High yield savings: 7% a year, withdraw up to the full balance."""

    kind: ClassVar[AccountKind] = AccountKind.HIGH_YIELD_SAVINGS
    interest_rate: ClassVar[Decimal] = Decimal("0.07")

    def withdrawal_limit(self) -> Decimal:
        return self.balance
