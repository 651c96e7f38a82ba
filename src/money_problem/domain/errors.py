"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised while converting
and aggregating money across currencies.

Files that USE this module:
- money_problem.domain.models (CurrencyMismatchError)
- money_problem.domain.bank (NoRateFoundError)
- money_problem.domain.pivot_bank (NoRateFoundError, InvalidRateError)
- money_problem.domain.portfolio (NoRateFoundError, MissingExchangeRatesError)
- money_problem.application.evaluate_portfolio (MissingExchangeRatesError)
- money_problem.shared.validators, money_problem.config.settings (InvalidRateError)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""
from __future__ import annotations

from typing import Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from money_problem.domain.models import Currency


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidRateError(DomainError):
    """Raised when a rate value is invalid (e.g., negative or zero)."""
    pass


class CurrencyMismatchError(DomainError):
    """Raised when adding two Money values held in different currencies."""
    pass


def format_pair(from_currency: Currency, to_currency: Currency) -> str:
    """Render a directed currency pair as ``FROM->TO``."""
    return f"{from_currency.value}->{to_currency.value}"


class NoRateFoundError(DomainError):
    """
    Raised when neither a direct nor a derivable rate exists for a pair.

    Attributes:
        from_currency: Currency the conversion was requested from
        to_currency: Currency the conversion was requested to
    """

    def __init__(self, from_currency: Currency, to_currency: Currency):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f"No exchange rate found for {format_pair(from_currency, to_currency)}")

    @property
    def pair(self) -> Tuple[Currency, Currency]:
        return self.from_currency, self.to_currency


class MissingExchangeRatesError(DomainError):
    """
    Raised by a portfolio evaluation when one or more entries could not be converted.

    Attributes:
        missing: Every unresolved (from, to) pair, in the order encountered
    """

    def __init__(self, missing: Sequence[Tuple[Currency, Currency]]):
        self.missing = tuple(missing)
        rendered = ",".join(f"[{format_pair(src, dst)}]" for src, dst in self.missing)
        super().__init__(f"Missing exchange rate(s): {rendered}")

    @property
    def message(self) -> str:
        return str(self)


# Name used by the kata's test suites
MissingExchangeRatesException = MissingExchangeRatesError
