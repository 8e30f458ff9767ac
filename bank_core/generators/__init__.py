"""Sample data generators."""

from bank_core.generators.accounts import AccountGenerator

__all__ = ["AccountGenerator"]
