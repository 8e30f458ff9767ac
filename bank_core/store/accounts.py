"""In-memory account registry."""

import logging
from decimal import Decimal
from typing import Any, Iterable, Iterator

from bank_core.exceptions import ConstructionError, WithdrawalDeniedError
from bank_core.models.account import Account
from bank_core.models.enums import WithdrawalStatus
from bank_core.models.results import InterestLine, WithdrawalResult
from bank_core.money import ZERO, positive_amount

logger = logging.getLogger(__name__)


class AccountRegistry:
    """Ordered collection of accounts of any policy.

    The registry only talks to accounts through the ``Account`` contract,
    so new account policies plug in without changes here. Accounts are kept
    in insertion order; the same holder may own several accounts.
    """

    def __init__(self, accounts: Iterable[Account] | None = None) -> None:
        self._accounts: list[Account] = []
        for account in accounts or ():
            self.add(account)

    def add(self, account: Account) -> Account:
        """Add an account to the registry.

        Raises
        ------
        ConstructionError
            If ``account`` is not an ``Account``; the registry is left unchanged.
        """
        if not isinstance(account, Account):
            raise ConstructionError(f"Only accounts can be registered, got {account!r}")

        self._accounts.append(account)
        logger.debug(
            "Registered %s account %s for %s",
            account.kind_label,
            account.account_id,
            account.holder,
            extra={"account_id": account.account_id},
        )
        return account

    @property
    def accounts(self) -> tuple[Account, ...]:
        return tuple(self._accounts)

    def total_annual_interest(self) -> Decimal:
        """Sum of annual interest over all accounts."""
        return sum((account.annual_interest() for account in self._accounts), ZERO)

    def report(self) -> list[InterestLine]:
        """Annual interest per account, in insertion order."""
        return [InterestLine(account, account.annual_interest()) for account in self._accounts]

    def attempt_withdrawal(self, account: Account, amount: Any) -> WithdrawalResult:
        """Ask ``account`` to withdraw ``amount`` and report the outcome.

        A policy refusal comes back as a ``DENIED`` result carrying the
        account's limit. An invalid amount is a caller error and raises
        ``InvalidAmountError``.
        """
        value = positive_amount(amount)
        try:
            balance = account.withdraw(value)
        except WithdrawalDeniedError as exc:
            logger.info(
                "Withdrawal denied for %s: %s",
                account.account_id,
                exc,
                extra={"account_id": account.account_id, "holder": account.holder},
            )
            return WithdrawalResult(
                account=account,
                amount=value,
                status=WithdrawalStatus.DENIED,
                balance=account.balance,
                limit=exc.limit,
                reason=str(exc),
            )

        return WithdrawalResult(
            account=account,
            amount=value,
            status=WithdrawalStatus.COMPLETED,
            balance=balance,
        )

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def __contains__(self, account: object) -> bool:
        return any(held is account for held in self._accounts)
