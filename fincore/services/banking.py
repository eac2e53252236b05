"""Batch operations across every account held by a bank."""

from decimal import Decimal
from typing import Iterator

from fincore.logging import get_logger
from fincore.models import Account, AccountType, Customer
from fincore.store import Bank

logger = get_logger(__name__)


class BankingService:
    """Operations spanning many customers of one bank."""

    def __init__(self, bank: Bank) -> None:
        self.bank = bank

    def iter_accounts(self) -> Iterator[tuple[Customer, Account]]:
        """Yield every (customer, account) pair in registry order."""
        for customer in self.bank.customers:
            for account in customer.accounts:
                yield customer, account

    def apply_interest_to_all(self) -> Decimal:
        """Run one interest period over every savings account.

        Returns
        -------
        Decimal
            Total interest credited. Refused (negative) interest is not counted.
        """
        total = Decimal("0")
        processed = 0
        for _, account in self.iter_accounts():
            if not account.is_savings:
                continue
            total += account.apply_interest()
            processed += 1
        logger.info(
            "Interest run credited %s across %d savings accounts",
            total,
            processed,
            extra={"extra": {"interest_total": str(total), "savings_accounts": processed}},
        )
        return total

    def balance_by_type(self) -> dict[AccountType, Decimal]:
        """Total balance per account type."""
        totals = {account_type: Decimal("0") for account_type in AccountType}
        for _, account in self.iter_accounts():
            totals[account.account_type] += account.balance
        return totals

    def count_by_type(self) -> dict[AccountType, int]:
        """Number of accounts per account type."""
        counts = {account_type: 0 for account_type in AccountType}
        for _, account in self.iter_accounts():
            counts[account.account_type] += 1
        return counts
