"""Configuration management for fincore."""

from dataclasses import dataclass, field

from fincore.exceptions import ConfigurationError


@dataclass
class BankConfig:
    """Customer id generation and display settings for a bank."""

    id_prefix: str = "CUST"
    id_width: int = 4
    first_sequence: int = 1
    currency_symbol: str = "$"

    def __post_init__(self) -> None:
        if not self.id_prefix:
            raise ConfigurationError("id_prefix must not be empty")
        if self.id_width < 1:
            raise ConfigurationError(f"id_width must be at least 1, got {self.id_width}")
        if self.first_sequence < 0:
            raise ConfigurationError(
                f"first_sequence must not be negative, got {self.first_sequence}"
            )

    def format_id(self, sequence: int) -> str:
        """Build a customer id from a sequence number."""
        return f"{self.id_prefix}{sequence:0{self.id_width}d}"


@dataclass
class GeneratorConfig:
    """Synthetic population settings."""

    num_customers: int = 10
    max_accounts_per_customer: int = 3
    savings_ratio: float = 0.3
    locale: str = "en_US"

    def __post_init__(self) -> None:
        if self.num_customers < 0:
            raise ConfigurationError(
                f"num_customers must not be negative, got {self.num_customers}"
            )
        if self.max_accounts_per_customer < 0:
            raise ConfigurationError(
                "max_accounts_per_customer must not be negative, "
                f"got {self.max_accounts_per_customer}"
            )
        if not 0.0 <= self.savings_ratio <= 1.0:
            raise ConfigurationError(
                f"savings_ratio must be between 0 and 1, got {self.savings_ratio}"
            )


@dataclass
class FinCoreConfig:
    """Main configuration for fincore."""

    bank: BankConfig = field(default_factory=BankConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FinCoreConfig":
        """Create config from environment variables."""
        import os

        try:
            bank = BankConfig(
                id_prefix=os.getenv("FINCORE_ID_PREFIX", "CUST"),
                id_width=int(os.getenv("FINCORE_ID_WIDTH", "4")),
                currency_symbol=os.getenv("FINCORE_CURRENCY_SYMBOL", "$"),
            )
            generator = GeneratorConfig(
                num_customers=int(os.getenv("FINCORE_NUM_CUSTOMERS", "10")),
                locale=os.getenv("FINCORE_LOCALE", "en_US"),
            )
            seed = int(os.getenv("FINCORE_SEED")) if os.getenv("FINCORE_SEED") else None
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        return cls(
            bank=bank,
            generator=generator,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
