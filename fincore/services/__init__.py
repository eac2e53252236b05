"""Services operating over a whole bank."""

from fincore.services.banking import BankingService

__all__ = ["BankingService"]
