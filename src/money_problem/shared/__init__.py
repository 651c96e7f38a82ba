# src/money_problem/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation and parsing of configured exchange rates
- Logging configuration
"""

from money_problem.shared.validators import (
    parse_rate_entries,
    parse_rate_entry,
    validate_currency_code,
    validate_rate,
)
from money_problem.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "validate_rate",
    "parse_rate_entry",
    "parse_rate_entries",
    "setup_logging",
]
