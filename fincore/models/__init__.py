"""Ledger domain models."""

from fincore.models.account import Account, SavingsAccount
from fincore.models.customer import Customer
from fincore.models.enums import AccountType

__all__ = ["Account", "AccountType", "Customer", "SavingsAccount"]
