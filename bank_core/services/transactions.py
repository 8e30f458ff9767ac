"""Withdraw from an account and tell the holder about it."""

import logging
from dataclasses import dataclass
from typing import Any

from bank_core.models.account import Account
from bank_core.models.results import DispatchReport, WithdrawalResult
from bank_core.notifications.dispatcher import NotificationDispatcher
from bank_core.store.accounts import AccountRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionOutcome:
    """Withdrawal result plus the notification fan-out it triggered, if any."""

    withdrawal: WithdrawalResult
    dispatch: DispatchReport | None = None

    @property
    def success(self) -> bool:
        return self.withdrawal.success


class TransactionProcessor:
    """Run withdrawals through the registry and notify on success.

    Depends only on the registry and the dispatcher; which channels are used
    is decided by whoever built the dispatcher.
    """

    def __init__(self, registry: AccountRegistry, dispatcher: NotificationDispatcher) -> None:
        self.registry = registry
        self.dispatcher = dispatcher

    def process_withdrawal(
        self,
        account: Account,
        amount: Any,
        recipient: str | None = None,
    ) -> TransactionOutcome:
        """Withdraw ``amount`` from ``account``.

        Parameters
        ----------
        account : Account
            Account to debit.
        amount : Any
            Amount to withdraw; must be positive.
        recipient : str | None
            Who to notify. Defaults to the account holder.

        Returns
        -------
        TransactionOutcome
            The withdrawal result, and the dispatch report when the
            withdrawal went through. Denied withdrawals are not notified.
        """
        result = self.registry.attempt_withdrawal(account, amount)
        if not result.success:
            return TransactionOutcome(withdrawal=result)

        logger.info("Processing transaction for %s: %s", account.holder, result.amount)
        report = self.dispatcher.dispatch(
            recipient or account.holder,
            f"Transaction processed: ${result.amount:.2f} debited from your account",
        )
        return TransactionOutcome(withdrawal=result, dispatch=report)
