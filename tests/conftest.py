"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from fincore.models import Account
from fincore.store import Bank


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def bank() -> Bank:
    """Create a fresh bank for each test."""
    return Bank()


@pytest.fixture
def checking() -> Account:
    """Checking account with 1000.00."""
    return Account("Alice", Decimal("1000.00"))


@pytest.fixture
def savings() -> Account:
    """Savings account with 1000.00 at 5%."""
    return Account.savings("Bob", Decimal("1000.00"), Decimal("0.05"))
