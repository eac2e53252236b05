"""Customer model: an identified owner of an ordered set of accounts."""

from dataclasses import dataclass, field
from decimal import Decimal

from fincore.exceptions import EntityNotFoundError
from fincore.logging import get_logger
from fincore.models.account import Account
from fincore.money import format_currency, format_rate

logger = get_logger(__name__)


@dataclass(frozen=True)
class Customer:
    """Bank customer entity.

    Equality and hashing use ``customer_id`` only, so two instances with the
    same id are interchangeable as dict keys or set members whatever their
    names. The account list keeps insertion order and holds each account
    reference at most once.
    """

    customer_id: str
    name: str = field(compare=False)
    _accounts: list[Account] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def accounts(self) -> list[Account]:
        """Snapshot of the accounts; changing it does not affect the customer."""
        return list(self._accounts)

    @property
    def account_count(self) -> int:
        return len(self._accounts)

    @property
    def total_balance(self) -> Decimal:
        return sum((account.balance for account in self._accounts), Decimal("0"))

    def add_account(self, account: Account | None) -> bool:
        """Append an account unless it is None or already held."""
        if account is None or self._holds(account):
            return False
        self._accounts.append(account)
        logger.debug("Added %s to customer %s", account, self.customer_id)
        return True

    def remove_account(self, account: Account | None) -> bool:
        """Remove the first entry that is ``account`` itself."""
        for i, held in enumerate(self._accounts):
            if held is account:
                del self._accounts[i]
                return True
        return False

    def get_account(self, index: int) -> Account | None:
        """Account at a 0-based position, or None when out of range."""
        if 0 <= index < len(self._accounts):
            return self._accounts[index]
        return None

    def require_account(self, index: int) -> Account:
        """Like :meth:`get_account` but raises when out of range."""
        account = self.get_account(index)
        if account is None:
            raise EntityNotFoundError(
                f"Customer {self.customer_id} has no account at index {index}"
            )
        return account

    def _holds(self, account: Account) -> bool:
        return any(held is account for held in self._accounts)

    def describe(self, currency_symbol: str = "$") -> str:
        """Account summary for display."""
        lines = [
            "=== Customer Account Summary ===",
            f"Customer ID: {self.customer_id}",
            f"Customer Name: {self.name}",
            f"Number of Accounts: {self.account_count}",
            f"Total Balance: {format_currency(self.total_balance, currency_symbol)}",
            "",
        ]
        if not self._accounts:
            lines.append("No accounts found for this customer.")
        for position, account in enumerate(self._accounts, start=1):
            kind = "SavingsAccount" if account.is_savings else "Account"
            lines.append(f"Account {position}: {kind}")
            lines.append(f"  Balance: {format_currency(account.balance, currency_symbol)}")
            if account.is_savings:
                lines.append(f"  Interest Rate: {format_rate(account.interest_rate)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return f"Customer[id={self.customer_id}, name={self.name}, accounts={self.account_count}]"
