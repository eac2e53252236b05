"""In-memory ledger model for customers, accounts and a bank registry."""

from fincore.models import Account, AccountType, Customer, SavingsAccount
from fincore.store import Bank

__all__ = ["Account", "AccountType", "Bank", "Customer", "SavingsAccount"]
