"""
Pivot Bank - Exchange Rates Quoted Against One Currency

Every rate held here is expressed against a single pivot currency, so a
conversion between two other currencies goes through the pivot.

Files that USE this module:
- money_problem.domain (re-exported; Portfolio.evaluate accepts it as a Converter)
- tests.test_pivot_bank (unit tests)

Files that this module USES:
- money_problem.domain.models (Currency, Money, ExchangeRate)
- money_problem.domain.errors (InvalidRateError, NoRateFoundError)
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

from money_problem.domain.errors import InvalidRateError, NoRateFoundError
from money_problem.domain.models import Currency, ExchangeRate, Money

logger = logging.getLogger(__name__)


class PivotBank:
    def __init__(self, pivot_currency: Currency):
        self.pivot_currency = pivot_currency
        self._rates: Dict[Currency, float] = {}

    @classmethod
    def with_pivot_currency(cls, pivot_currency: Currency) -> PivotBank:
        return cls(pivot_currency)

    def add(self, exchange_rate: ExchangeRate) -> PivotBank:
        """
        Store or replace the rate of a currency against the pivot.

        Returns:
            The bank itself, for chaining

        Raises:
            InvalidRateError: If the rate is not a positive finite number or targets the pivot currency
        """
        if exchange_rate.currency == self.pivot_currency:
            raise InvalidRateError(f"Can not add an exchange rate for the pivot currency {self.pivot_currency}")
        if not math.isfinite(exchange_rate.rate) or exchange_rate.rate <= 0:
            raise InvalidRateError(f"Exchange rate should be a finite number greater than 0, got {exchange_rate.rate}")
        self._rates[exchange_rate.currency] = exchange_rate.rate
        logger.debug("Pivot %s: 1 %s = %s %s", self.pivot_currency, self.pivot_currency,
                     exchange_rate.rate, exchange_rate.currency)
        return self

    def convert(self, money: Money, to_currency: Currency) -> Money:
        """
        Convert money into to_currency through the pivot.

        Raises:
            NoRateFoundError: If either side has no rate against the pivot
        """
        if money.currency == to_currency:
            return money
        requested = (money.currency, to_currency)
        if money.currency == self.pivot_currency:
            return Money(money.amount * self._rate_for(to_currency, requested), to_currency)
        in_pivot = money.amount / self._rate_for(money.currency, requested)
        if to_currency == self.pivot_currency:
            return Money(in_pivot, to_currency)
        return Money(in_pivot * self._rate_for(to_currency, requested), to_currency)

    def _rate_for(self, currency: Currency, requested: Tuple[Currency, Currency]) -> float:
        # failures report the pair the caller asked for, not the hop
        if currency not in self._rates:
            raise NoRateFoundError(*requested)
        return self._rates[currency]
