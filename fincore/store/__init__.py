"""In-memory customer registry."""

from fincore.store.bank import Bank

__all__ = ["Bank"]
