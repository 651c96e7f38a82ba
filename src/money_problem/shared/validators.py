"""
Input Validation Utilities - Currency and Rate Validation

This module provides validation and parsing functions for currency codes
and configured exchange rate entries, so invalid configuration is rejected
before it reaches a rate table.

Files that USE this module:
- money_problem.config.settings (uses validation functions in Settings field validators)
- money_problem.shared (re-exported for callers)
- tests.test_settings (TestValidators unit tests)

Files that this module USES:
- money_problem.domain.models (Currency)
- money_problem.domain.errors (InvalidRateError)
"""
import math
import re
from typing import List, Optional, Tuple

from money_problem.domain.errors import InvalidRateError
from money_problem.domain.models import Currency

# EUR->USD=1.2
_RATE_ENTRY = re.compile(r'^\s*([A-Za-z]{3})\s*->\s*([A-Za-z]{3})\s*=\s*(\S+)\s*$')

RateEntry = Tuple[Currency, Currency, float]


def validate_currency_code(code: str) -> bool:
    """
    Validate that a code names a supported currency.

    Args:
        code: Currency code to validate (case-insensitive)

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return code.strip().upper() in Currency.__members__


def validate_rate(value: str, min_val: Optional[float] = 0.0) -> bool:
    """
    Validate an exchange rate string.

    Args:
        value: String value to validate
        min_val: Exclusive lower bound (default: 0.0)

    Returns:
        True if the value is a finite number above min_val, False otherwise
    """
    if not value:
        return False

    try:
        num_val = float(value)
    except ValueError:
        return False
    if not math.isfinite(num_val):
        return False
    if min_val is not None and num_val <= min_val:
        return False
    return True


def parse_rate_entry(entry: str) -> RateEntry:
    """
    Parse a single ``FROM->TO=RATE`` entry.

    Args:
        entry: Text such as "EUR->USD=1.2"

    Returns:
        (from_currency, to_currency, rate)

    Raises:
        InvalidRateError: If the entry is malformed, names an unknown
            currency, or carries a non-positive rate
    """
    match = _RATE_ENTRY.match(entry)
    if not match:
        raise InvalidRateError(f"Malformed exchange rate entry '{entry}', expected FROM->TO=RATE")

    src, dst, rate = match.groups()
    for code in (src, dst):
        if not validate_currency_code(code):
            raise InvalidRateError(f"Unknown currency '{code}' in entry '{entry}'")
    if not validate_rate(rate):
        raise InvalidRateError(f"Exchange rate must be a positive number, got '{rate}'")

    return Currency[src.upper()], Currency[dst.upper()], float(rate)


def parse_rate_entries(text: str) -> List[RateEntry]:
    """
    Parse a comma-separated list of rate entries.

    Empty segments are ignored, so "" yields an empty list.
    """
    if not text:
        return []
    return [parse_rate_entry(part) for part in text.split(",") if part.strip()]
