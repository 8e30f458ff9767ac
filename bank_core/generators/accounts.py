"""Sample account portfolio generator."""

from decimal import Decimal
from typing import Iterator

from bank_core.factory import open_account
from bank_core.generators.base import BaseGenerator
from bank_core.models.account import Account
from bank_core.models.enums import AccountKind
from bank_core.money import CENTS
from bank_core.store.accounts import AccountRegistry


class AccountGenerator(BaseGenerator):
    """Generate accounts of every bundled kind with plausible balances.

    Kind mix:
    - Savings: ~45%
    - Money Market: ~20%
    - Fixed Deposit: ~20%
    - High Yield Savings: ~15%
    """

    ACCOUNT_KINDS = list(AccountKind)
    ACCOUNT_KIND_WEIGHTS = [0.45, 0.20, 0.20, 0.15]
    LOCK_IN_MONTHS = [6, 12, 24, 36]

    BALANCE_RANGES = {
        AccountKind.SAVINGS: (100, 25_000),
        AccountKind.MONEY_MARKET: (2_500, 100_000),
        AccountKind.FIXED_DEPOSIT: (1_000, 250_000),
        AccountKind.HIGH_YIELD_SAVINGS: (500, 50_000),
    }

    def generate(self, holder: str | None = None, kind: AccountKind | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        holder : str | None
            Account holder; a Faker name when omitted.
        kind : AccountKind | None
            Account kind; drawn from the kind mix when omitted.

        Returns
        -------
        Account
            Generated account.
        """
        if kind is None:
            kind = self.rng.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]

        low, high = self.BALANCE_RANGES[kind]
        balance = Decimal(str(round(self.rng.uniform(low, high), 2))).quantize(CENTS)

        options: dict[str, int] = {}
        if kind is AccountKind.FIXED_DEPOSIT:
            options["lock_in_months"] = self.rng.choice(self.LOCK_IN_MONTHS)

        return open_account(kind, holder or self.fake.name(), balance, **options)

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate ``count`` accounts."""
        for _ in range(count):
            yield self.generate()

    def generate_registry(self, count: int) -> AccountRegistry:
        """Generate ``count`` accounts into a fresh registry."""
        return AccountRegistry(self.generate_batch(count))
