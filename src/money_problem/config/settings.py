"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables (and a local .env file) with validation.

Files that USE this module:
- money_problem.application.bank_loader (seed rates and inverse derivation flag)
- money_problem.shared.logging_conf (default logging configuration)
- money_problem.adapters.persistence.in_memory (Settings type for from_settings)
- tests.test_settings, tests.test_evaluate_portfolio (unit tests)

Files that this module USES:
- money_problem.shared.validators (validation functions for settings)
- money_problem.domain.errors (InvalidRateError raised by the parsers)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import List, Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from money_problem.domain.errors import InvalidRateError
from money_problem.shared.validators import (
    RateEntry,
    parse_rate_entries,  # Parse FROM->TO=RATE entries
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Package settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Exchange rates ---
    # Comma-separated directed rates, e.g. "EUR->USD=1.2,USD->KRW=1100"
    exchange_rates: str = Field(default="", alias="MONEY_EXCHANGE_RATES")
    derive_inverse_rates: bool = Field(default=True, alias="MONEY_DERIVE_INVERSE_RATES")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="MONEY_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @property
    def rate_entries(self) -> List[RateEntry]:
        """Configured rates as (from_currency, to_currency, rate) tuples."""
        return parse_rate_entries(self.exchange_rates)

    @field_validator("exchange_rates")
    @classmethod
    def validate_exchange_rates(cls, v: str) -> str:
        """Validate every configured rate entry."""
        try:
            parse_rate_entries(v)
        except InvalidRateError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level


# Global settings instance
settings = Settings()
