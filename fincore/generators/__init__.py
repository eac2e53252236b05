"""Synthetic data generators."""

from fincore.generators.bank import BankGenerator

__all__ = ["BankGenerator"]
