"""
Domain Models - Pure Business Objects

This module contains the value objects the rest of the package is built on:
- Currency: the closed set of supported currency codes
- Money: an immutable amount held in one currency
- ExchangeRate: a rate quoted against a pivot currency

Files that USE this module:
- money_problem.domain.* (banks and portfolio operate on Money)
- money_problem.application.* (use case results are built from Money)
- tests.* (tests build Money with the factory helpers)

Files that this module USES:
- money_problem.domain.errors (CurrencyMismatchError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Closed enumeration for currency codes

from money_problem.domain.errors import CurrencyMismatchError


class Currency(str, Enum):
    """Supported currencies, valued by their ISO 4217 code."""
    USD = "USD"
    EUR = "EUR"
    KRW = "KRW"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """
    An amount of money in a single currency.

    Attributes:
        amount: Signed amount as float
        currency: Currency the amount is held in
    """
    amount: float
    currency: Currency

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(0.0, currency)

    def add(self, other: Money) -> Money:
        """
        Sum two amounts held in the same currency.

        Raises:
            CurrencyMismatchError: If the currencies differ
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot add {other.currency} to {self.currency} without conversion"
            )
        return Money(self.amount + other.amount, self.currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __str__(self) -> str:
        return f"{self.amount:g} {self.currency}"


@dataclass(frozen=True)
class ExchangeRate:
    """
    Rate of one currency against a pivot currency.

    Attributes:
        rate: Units of ``currency`` worth one unit of the pivot
        currency: Currency the rate is quoted in
    """
    rate: float
    currency: Currency


def dollars(amount: float) -> Money:
    return Money(amount, Currency.USD)


def euros(amount: float) -> Money:
    return Money(amount, Currency.EUR)


def korean_wons(amount: float) -> Money:
    return Money(amount, Currency.KRW)
