"""Ready-made portfolios for demos and tests."""

from bank_core.scenarios.demo import build_demo_registry, run_demo_withdrawals

__all__ = ["build_demo_registry", "run_demo_withdrawals"]
