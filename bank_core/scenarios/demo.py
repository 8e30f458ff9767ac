"""Reference portfolio and withdrawal script.

Four accounts, one per bundled policy, and one withdrawal against each:
an allowed savings withdrawal, a money market withdrawal that eats into
the 5% reserve, a fixed deposit withdrawal and an allowed high yield one.
"""

from decimal import Decimal

from bank_core.factory import open_account
from bank_core.models.enums import AccountKind
from bank_core.models.results import WithdrawalResult
from bank_core.store.accounts import AccountRegistry

DEMO_ACCOUNTS = [
    (AccountKind.SAVINGS, "Alice Johnson", Decimal("5000"), {}),
    (AccountKind.MONEY_MARKET, "Bob Smith", Decimal("10000"), {}),
    (AccountKind.FIXED_DEPOSIT, "Carol White", Decimal("20000"), {"lock_in_months": 12}),
    (AccountKind.HIGH_YIELD_SAVINGS, "David Brown", Decimal("15000"), {}),
]

DEMO_WITHDRAWALS = [Decimal("2000"), Decimal("9600"), Decimal("100"), Decimal("5000")]


def build_demo_registry() -> AccountRegistry:
    """Registry holding the four reference accounts, in order."""
    registry = AccountRegistry()
    for kind, holder, balance, options in DEMO_ACCOUNTS:
        registry.add(open_account(kind, holder, balance, **options))
    return registry


def run_demo_withdrawals(registry: AccountRegistry) -> list[WithdrawalResult]:
    """Attempt the reference withdrawals against the first accounts of ``registry``."""
    return [
        registry.attempt_withdrawal(account, amount)
        for account, amount in zip(registry, DEMO_WITHDRAWALS)
    ]
