"""Tests for ledger snapshots."""

import json
from decimal import Decimal

from fincore.models import Account, AccountType
from fincore.serialization import (
    account_to_dict,
    bank_to_dict,
    customer_to_dict,
    serialize_value,
)
from fincore.store import Bank


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_enum(self) -> None:
        assert serialize_value(AccountType.SAVINGS) == "SAVINGS"

    def test_nested(self) -> None:
        result = serialize_value({"amounts": [Decimal("1.50")], "name": "x"})
        assert result == {"amounts": ["1.50"], "name": "x"}


class TestSnapshots:
    """Tests for entity snapshots."""

    def test_checking_account(self) -> None:
        data = account_to_dict(Account("Alice", Decimal("10.00")))
        assert data == {"holder": "Alice", "account_type": "CHECKING", "balance": "10.00"}

    def test_savings_account(self) -> None:
        data = account_to_dict(Account.savings("Bob", Decimal("5"), Decimal("0.05")))
        assert data["interest_rate"] == "0.05"

    def test_customer(self) -> None:
        bank = Bank()
        customer = bank.register_customer("C1", "Alice")
        customer.add_account(Account("Alice", Decimal("10.00")))

        data = customer_to_dict(customer)

        assert data["customer_id"] == "C1"
        assert data["total_balance"] == "10.00"
        assert len(data["accounts"]) == 1

    def test_bank_is_json_serializable(self) -> None:
        bank = Bank()
        bank.add_customer("Alice").add_account(Account("Alice", Decimal("1.00")))

        data = bank_to_dict(bank)

        assert data["customer_count"] == 1
        assert data["total_account_count"] == 1
        assert json.loads(json.dumps(data)) == data
