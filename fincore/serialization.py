"""Plain-dict snapshots of ledger entities for JSON output."""

from decimal import Decimal
from enum import Enum
from typing import Any

from fincore.models import Account, Customer
from fincore.store import Bank


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def account_to_dict(account: Account) -> dict:
    """Convert an account to a dict."""
    data = {
        "holder": account.holder,
        "account_type": account.account_type,
        "balance": account.balance,
    }
    if account.is_savings:
        data["interest_rate"] = account.interest_rate
    return serialize_value(data)


def customer_to_dict(customer: Customer) -> dict:
    """Convert a customer and its accounts to a dict."""
    return {
        "customer_id": customer.customer_id,
        "name": customer.name,
        "total_balance": serialize_value(customer.total_balance),
        "accounts": [account_to_dict(a) for a in customer.accounts],
    }


def bank_to_dict(bank: Bank) -> dict:
    """Convert a bank snapshot to a dict."""
    return {
        "customer_count": bank.customer_count,
        "total_account_count": bank.total_account_count,
        "total_balance": serialize_value(bank.total_balance),
        "customers": [customer_to_dict(c) for c in bank.customers],
    }
