"""Console sink: human-readable rendering of reports and outcomes."""

from bank_core.models.results import DispatchReport, WithdrawalResult
from bank_core.store.accounts import AccountRegistry

RULE = "=" * 60


class ConsoleSink:
    """Print interest reports, withdrawal outcomes and dispatch outcomes to stdout."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def write_interest_report(self, registry: AccountRegistry) -> None:
        """Print one line per account and the total."""
        print(f"\n{RULE}")
        print("ANNUAL INTEREST CALCULATION REPORT")
        print(RULE)

        for line in registry.report():
            print(f"  {line.account}")
            print(f"  -> Annual Interest: ${line.interest:.2f}")

        print(RULE)
        print(f"TOTAL ANNUAL INTEREST: ${registry.total_annual_interest():.2f}")
        print(RULE)
        self._bump("interest_reports")

    def write_withdrawal(self, result: WithdrawalResult) -> None:
        """Print the outcome of one withdrawal attempt."""
        if result.success:
            print(f"  OK   Withdrew ${result.amount:.2f} from {result.account.kind_label} "
                  f"({result.account.holder}); balance ${result.balance:.2f}")
        else:
            print(f"  DENY Cannot withdraw ${result.amount:.2f} from {result.account.kind_label} "
                  f"({result.account.holder}); withdrawal limit ${result.limit:.2f}")
        self._bump("withdrawals")

    def write_dispatch(self, report: DispatchReport) -> None:
        """Print every channel outcome of one dispatch."""
        print(f"\nNotification to {report.recipient}: {report.message}")
        for result in report.results:
            print(f"  {result}")
        self._bump("dispatches")

    def close(self) -> None:
        """Print summary."""
        print(f"\n{RULE}")
        print("Console Sink Summary")
        print(RULE)
        for kind, count in self._counts.items():
            print(f"  {kind}: {count}")

    def _bump(self, kind: str) -> None:
        self._counts[kind] = self._counts.get(kind, 0) + 1
