"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_core.models.account import Account


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization.

    Uses ``fields()`` + ``getattr`` rather than ``asdict()`` so nested
    accounts go through ``account_to_dict`` and keep their kind and rate.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def account_to_dict(account: Account) -> dict:
    """Account fields plus the policy values consumers usually want to see."""
    data = {
        "account_id": account.account_id,
        "kind": account.kind_label,
        "holder": account.holder,
        "balance": serialize_value(account.balance),
        "interest_rate": serialize_value(account.interest_rate),
        "withdrawal_limit": serialize_value(account.withdrawal_limit()),
    }
    for f in fields(account):
        data.setdefault(f.name, serialize_value(getattr(account, f.name)))
    return data


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, Account):
        return account_to_dict(value)
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
