"""Populate a bank with synthetic customers and accounts."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from fincore.config import GeneratorConfig
from fincore.generators.base import BaseGenerator
from fincore.logging import get_logger
from fincore.models import Account, Customer
from fincore.store import Bank

logger = get_logger(__name__)


class BankGenerator(BaseGenerator):
    """Generate customers with checking and savings accounts.

    Balances are drawn log-normally (median around 2,700) and quantized to
    cents. Savings rates fall between 0.5% and 5%.
    """

    MIN_RATE = Decimal("0.005")
    MAX_RATE = Decimal("0.05")

    def __init__(self, seed: int | None = None, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        super().__init__(seed, locale=self.config.locale)

    def generate_account(self, holder: str) -> Account:
        """Generate a single account for ``holder``.

        Parameters
        ----------
        holder : str
            Account holder name.

        Returns
        -------
        Account
            Checking or savings account, chosen by ``savings_ratio``.
        """
        balance = Decimal(str(round(self.rng.lognormvariate(mu=7.9, sigma=1.0), 2)))
        if self.rng.random() < self.config.savings_ratio:
            raw = self.rng.uniform(float(self.MIN_RATE), float(self.MAX_RATE))
            rate = Decimal(str(round(raw, 4)))
            return Account.savings(holder, balance, rate)
        return Account.checking(holder, balance)

    def populate(self, bank: Bank, num_customers: int | None = None) -> Iterator[Customer]:
        """Add customers with generated ids to ``bank``.

        Parameters
        ----------
        bank : Bank
            Registry to fill.
        num_customers : int | None
            How many customers to add (default from config).

        Yields
        ------
        Customer
            Each customer after its accounts are attached.
        """
        count = self.config.num_customers if num_customers is None else num_customers
        for _ in range(count):
            customer = bank.add_customer(self.fake.name())
            for _ in range(self.rng.randint(0, self.config.max_accounts_per_customer)):
                customer.add_account(self.generate_account(customer.name))
            yield customer
        logger.info("Generated %d customers", count)
