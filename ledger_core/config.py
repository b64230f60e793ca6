"""Configuration management for the ledger."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from ledger_core.exceptions import ConfigurationError
from ledger_core.logging import LOG_FORMATS, LOG_LEVELS, setup_logging


@dataclass(frozen=True)
class LimitsConfig:
    """Validation limits for names, amounts and percentages."""

    min_operation_amount: Decimal = Decimal("0.01")
    max_operation_amount: Decimal = Decimal("100000")
    min_initial_balance: Decimal = Decimal("0")
    max_initial_balance: Decimal = Decimal("1000000000")
    min_yield_percent: Decimal = Decimal("0.01")
    max_yield_percent: Decimal = Decimal("50")
    name_min_length: int = 3
    name_max_length: int = 100


DEFAULT_LIMITS = LimitsConfig()


@dataclass
class LedgerConfig:
    """Main configuration for the ledger core.

    ``limits`` and ``first_account_number`` are read by ``LedgerService``.
    ``log_level`` and ``log_format`` drive ``configure_logging``. ``seed``
    is the default seed of ``PopulationScenario``.
    """

    limits: LimitsConfig = field(default_factory=LimitsConfig)
    first_account_number: int = 1001
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.first_account_number < 1:
            raise ConfigurationError(
                f"first_account_number must be positive, got {self.first_account_number}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"log_format must be one of {', '.join(LOG_FORMATS)}, got {self.log_format!r}"
            )

    def configure_logging(self) -> logging.Handler:
        """Install the console handler for ``log_level`` and ``log_format``."""
        return setup_logging(self.log_level, self.log_format)

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        limits = LimitsConfig(
            max_operation_amount=_env_decimal(
                "LEDGER_MAX_OPERATION_AMOUNT", DEFAULT_LIMITS.max_operation_amount
            ),
            max_initial_balance=_env_decimal(
                "LEDGER_MAX_INITIAL_BALANCE", DEFAULT_LIMITS.max_initial_balance
            ),
            max_yield_percent=_env_decimal(
                "LEDGER_MAX_YIELD_PERCENT", DEFAULT_LIMITS.max_yield_percent
            ),
        )

        seed = os.getenv("SEED")

        return cls(
            limits=limits,
            first_account_number=_env_int("LEDGER_FIRST_ACCOUNT_NUMBER", 1001),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=_env_int("SEED", 0) if seed else None,
        )


def _env_int(name: str, default: int) -> int:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_decimal(name: str, default: Decimal) -> Decimal:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if not value.is_finite() or value <= 0:
        raise ConfigurationError(f"{name} must be a positive number, got {raw!r}")
    return value
