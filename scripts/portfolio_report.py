#!/usr/bin/env python3
"""Print an interest report, run withdrawals and send notifications.

Two modes:
- ``demo``: the four reference accounts and their reference withdrawals.
- ``generate``: a random portfolio built by ``AccountGenerator``.

Both render to the console; ``--json`` also writes the report and the
dispatch log under the configured output directory.

Examples:
    python scripts/portfolio_report.py demo
    python scripts/portfolio_report.py generate --accounts 25 --seed 7 --json
    NOTIFY_CHANNELS=email,push,whatsapp python scripts/portfolio_report.py demo
"""

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_core.config import BankCoreConfig
from bank_core.exceptions import BankCoreError
from bank_core.factory import build_dispatcher
from bank_core.generators import AccountGenerator
from bank_core.logging import setup_logging
from bank_core.money import CENTS, quantize_cents
from bank_core.scenarios import build_demo_registry
from bank_core.scenarios.demo import DEMO_WITHDRAWALS
from bank_core.services import TransactionProcessor
from bank_core.sinks import ConsoleSink, JsonFileSink
from bank_core.store import AccountRegistry

logger = logging.getLogger(__name__)


def portfolio_size(requested: int | None, config: BankCoreConfig) -> int:
    """Number of accounts to generate; an explicit 0 is honoured."""
    return requested if requested is not None else config.portfolio.num_accounts


def withdrawal_amounts(registry: AccountRegistry, demo: bool) -> list[Decimal]:
    """Reference amounts for the demo, otherwise half of each account's limit.

    Accounts that allow nothing get a tenth of their balance, so the report
    shows the refusal.
    """
    if demo:
        return list(DEMO_WITHDRAWALS)

    amounts = []
    for account in registry:
        limit = account.withdrawal_limit()
        base = limit / 2 if limit > 0 else account.balance / 10
        amounts.append(max(quantize_cents(base), CENTS))
    return amounts


def run(registry: AccountRegistry, config: BankCoreConfig, demo: bool, write_json: bool) -> None:
    """Render the report, run withdrawals and notify the holders."""
    console = ConsoleSink()
    json_sink = (
        JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
        if write_json
        else None
    )

    console.write_interest_report(registry)
    if json_sink:
        json_sink.write_interest_report(registry)

    dispatcher = build_dispatcher(config.notifications)
    processor = TransactionProcessor(registry, dispatcher)

    print("\nWITHDRAWAL TESTS")
    for account, amount in zip(registry, withdrawal_amounts(registry, demo)):
        outcome = processor.process_withdrawal(account, amount)
        console.write_withdrawal(outcome.withdrawal)
        if outcome.dispatch:
            console.write_dispatch(outcome.dispatch)
            if json_sink:
                json_sink.write_dispatch(outcome.dispatch)

    console.close()
    if json_sink:
        json_sink.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Account interest and withdrawal report")
    parser.add_argument(
        "mode",
        choices=["demo", "generate"],
        help="Use the reference portfolio or generate a random one",
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=None,
        help="Number of accounts to generate (default: NUM_ACCOUNTS or 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also write JSON output to OUTPUT_DIR",
    )
    args = parser.parse_args()

    try:
        config = BankCoreConfig.from_env()
    except BankCoreError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_format)

    if args.mode == "demo":
        registry = build_demo_registry()
    else:
        generator = AccountGenerator(
            seed=args.seed if args.seed is not None else config.seed,
            locale=config.portfolio.locale,
        )
        registry = generator.generate_registry(portfolio_size(args.accounts, config))

    try:
        run(registry, config, demo=args.mode == "demo", write_json=args.json)
    except BankCoreError as exc:
        logger.error("Run failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
