"""Tests for the portfolio_report script helpers."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from bank_core.config import BankCoreConfig, PortfolioConfig

SCRIPT = Path(__file__).parent.parent / "scripts" / "portfolio_report.py"


@pytest.fixture(scope="module")
def script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("portfolio_report", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestPortfolioSize:
    """Tests for resolving --accounts against the configuration."""

    def test_unset_falls_back_to_config(self, script: ModuleType) -> None:
        config = BankCoreConfig(portfolio=PortfolioConfig(num_accounts=7))

        assert script.portfolio_size(None, config) == 7

    def test_explicit_count_wins(self, script: ModuleType) -> None:
        config = BankCoreConfig(portfolio=PortfolioConfig(num_accounts=7))

        assert script.portfolio_size(3, config) == 3

    def test_explicit_zero_is_not_unset(self, script: ModuleType) -> None:
        config = BankCoreConfig(portfolio=PortfolioConfig(num_accounts=7))

        assert script.portfolio_size(0, config) == 0
