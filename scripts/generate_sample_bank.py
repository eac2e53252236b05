#!/usr/bin/env python3
"""Generate a sample bank for manual inspection.

Builds a bank populated with synthetic customers, runs one interest period
over the savings accounts, prints the bank summary and writes a JSON
snapshot to the local/ folder.
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fincore.config import FinCoreConfig
from fincore.generators import BankGenerator
from fincore.logging import get_logger, setup_logging
from fincore.serialization import bank_to_dict
from fincore.services import BankingService
from fincore.store import Bank

logger = get_logger("fincore.scripts.generate_sample_bank")


def save_json(data: dict, filename: str, output_dir: Path) -> None:
    """Save data to JSON file."""
    filepath = output_dir / filename
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"Saved snapshot to {filepath}")


def main() -> None:
    """Generate, summarise and save a sample bank."""
    config = FinCoreConfig.from_env()
    setup_logging(config.log_level)

    output_dir = project_root / "local"
    output_dir.mkdir(exist_ok=True)

    bank = Bank(config.bank)
    seed = config.seed if config.seed is not None else 42
    generator = BankGenerator(seed=seed, config=config.generator)
    customers = list(generator.populate(bank))
    logger.info("Populated bank with %d customers", len(customers))

    service = BankingService(bank)
    interest = service.apply_interest_to_all()

    print("=" * 60)
    print(bank.describe())
    print("=" * 60)
    print(f"Interest credited: {config.bank.currency_symbol}{interest:.2f}")
    for account_type, count in service.count_by_type().items():
        print(f"{account_type.value + ':':18}{count}")

    save_json(bank_to_dict(bank), "bank.json", output_dir)


if __name__ == "__main__":
    main()
