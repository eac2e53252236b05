"""Tests for BankingService."""

import logging
from decimal import Decimal

import pytest

from fincore.models import Account, AccountType
from fincore.services import BankingService
from fincore.store import Bank


@pytest.fixture
def populated_bank(bank: Bank) -> Bank:
    """Bank with two customers holding mixed accounts."""
    alice = bank.register_customer("C1", "Alice")
    bob = bank.register_customer("C2", "Bob")
    alice.add_account(Account("Alice", Decimal("100.00")))
    alice.add_account(Account.savings("Alice", Decimal("200.00"), Decimal("0.10")))
    bob.add_account(Account.savings("Bob", Decimal("1000.00"), Decimal("0.05")))
    return bank


class TestBankingService:
    """Tests for bank-wide operations."""

    def test_iter_accounts(self, populated_bank: Bank) -> None:
        pairs = list(BankingService(populated_bank).iter_accounts())

        assert [customer.customer_id for customer, _ in pairs] == ["C1", "C1", "C2"]
        assert [account.holder for _, account in pairs] == ["Alice", "Alice", "Bob"]

    def test_apply_interest_to_all(self, populated_bank: Bank) -> None:
        total = BankingService(populated_bank).apply_interest_to_all()

        assert total == Decimal("70.00")
        assert populated_bank.total_balance == Decimal("1370.00")
        assert populated_bank.get_customer("C1").get_account(0).balance == Decimal("100.00")

    def test_refused_interest_not_counted(self, bank: Bank) -> None:
        customer = bank.add_customer("Carol")
        account = Account.savings("Carol", Decimal("100"), Decimal("-0.5"))
        customer.add_account(account)

        assert BankingService(bank).apply_interest_to_all() == Decimal("0")
        assert account.balance == Decimal("100")

    def test_empty_bank(self, bank: Bank) -> None:
        service = BankingService(bank)

        assert service.apply_interest_to_all() == Decimal("0")
        assert service.balance_by_type() == {
            AccountType.CHECKING: Decimal("0"),
            AccountType.SAVINGS: Decimal("0"),
        }

    def test_balance_by_type(self, populated_bank: Bank) -> None:
        totals = BankingService(populated_bank).balance_by_type()

        assert totals[AccountType.CHECKING] == Decimal("100.00")
        assert totals[AccountType.SAVINGS] == Decimal("1200.00")

    def test_count_by_type(self, populated_bank: Bank) -> None:
        counts = BankingService(populated_bank).count_by_type()

        assert counts == {AccountType.CHECKING: 1, AccountType.SAVINGS: 2}

    def test_interest_run_log_fields(self, populated_bank: Bank, caplog) -> None:
        caplog.set_level(logging.INFO, logger="fincore.services.banking")

        BankingService(populated_bank).apply_interest_to_all()

        (record,) = caplog.records
        assert Decimal(record.extra["interest_total"]) == Decimal("70.00")
        assert record.extra["savings_accounts"] == 2
