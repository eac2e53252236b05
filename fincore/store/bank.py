"""Bank registry: customers keyed by id, with id generation and aggregates."""

from decimal import Decimal

from fincore.config import BankConfig
from fincore.exceptions import DuplicateIdentifierError, EntityNotFoundError
from fincore.logging import get_logger
from fincore.models import Customer
from fincore.money import format_currency

logger = get_logger(__name__)


class Bank:
    """In-memory registry of customers.

    Every key in the registry equals the ``customer_id`` of its customer.
    Generated ids take the form ``prefix + zero-padded sequence`` (``CUST0001``
    with the default config). The sequence advances on every generation
    attempt, including ones that collide with a caller-supplied id.

    Aggregates are recomputed on each call, never cached.
    """

    def __init__(self, config: BankConfig | None = None) -> None:
        self.config = config or BankConfig()
        self._customers: dict[str, Customer] = {}
        self._next_sequence = self.config.first_sequence

    def add_customer(self, name: str, customer_id: str | None = None) -> Customer | None:
        """Register a customer.

        Parameters
        ----------
        name : str
            Customer name.
        customer_id : str | None
            Explicit id. When omitted a fresh id is generated and the call
            always succeeds.

        Returns
        -------
        Customer | None
            The new customer, or None if ``customer_id`` is already taken.
        """
        if customer_id is not None:
            return self.register_customer(customer_id, name)

        customer_id = self._generate_customer_id()
        while customer_id in self._customers:
            customer_id = self._generate_customer_id()
        return self._register(Customer(customer_id, name))

    def register_customer(self, customer_id: str, name: str) -> Customer | None:
        """Register a customer under a caller-supplied id.

        Returns None and leaves the registry untouched if the id exists.
        """
        if customer_id in self._customers:
            logger.info(
                "Customer id %s already registered",
                customer_id,
                extra={"extra": {"customer_id": customer_id}},
            )
            return None
        return self._register(Customer(customer_id, name))

    def require_new_customer(self, customer_id: str, name: str) -> Customer:
        """Like :meth:`register_customer` but raises when the id is taken."""
        customer = self.register_customer(customer_id, name)
        if customer is None:
            raise DuplicateIdentifierError(f"Customer {customer_id} already exists")
        return customer

    def _register(self, customer: Customer) -> Customer:
        self._customers[customer.customer_id] = customer
        logger.info(
            "Registered customer %s (%s)",
            customer.customer_id,
            customer.name,
            extra={"extra": {"customer_id": customer.customer_id}},
        )
        return customer

    def _generate_customer_id(self) -> str:
        customer_id = self.config.format_id(self._next_sequence)
        self._next_sequence += 1
        return customer_id

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)

    def require_customer(self, customer_id: str) -> Customer:
        """Like :meth:`get_customer` but raises when the id is unknown."""
        customer = self._customers.get(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer {customer_id} not found")
        return customer

    def has_customer(self, customer_id: str) -> bool:
        return customer_id in self._customers

    def remove_customer(self, customer_id: str) -> Customer | None:
        """Drop a customer from the registry and return it, or None."""
        customer = self._customers.pop(customer_id, None)
        if customer is not None:
            logger.info(
                "Removed customer %s",
                customer_id,
                extra={"extra": {"customer_id": customer_id}},
            )
        return customer

    def find_customers(self, name: str) -> list[Customer]:
        """Customers whose name matches ``name``, ignoring case."""
        wanted = name.casefold()
        return [c for c in self._customers.values() if c.name.casefold() == wanted]

    @property
    def customers(self) -> list[Customer]:
        """Snapshot of all registered customers."""
        return list(self._customers.values())

    @property
    def customer_count(self) -> int:
        return len(self._customers)

    @property
    def total_account_count(self) -> int:
        return sum(c.account_count for c in self._customers.values())

    @property
    def total_balance(self) -> Decimal:
        return sum((c.total_balance for c in self._customers.values()), Decimal("0"))

    def describe(self) -> str:
        """Bank summary for display."""
        symbol = self.config.currency_symbol
        lines = [
            "=== Bank Summary ===",
            f"Total Customers: {self.customer_count}",
            f"Total Accounts: {self.total_account_count}",
            f"Total Bank Balance: {format_currency(self.total_balance, symbol)}",
            "",
        ]
        if not self._customers:
            lines.append("No customers found in the bank.")
        else:
            lines.append("Customer List:")
            lines.extend(f"  {customer}" for customer in self._customers.values())
        return "\n".join(lines)

    def __str__(self) -> str:
        return f"Bank[customers={self.customer_count}, totalAccounts={self.total_account_count}]"
