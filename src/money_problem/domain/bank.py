"""
Bank - Directed Exchange Rate Table

This module holds the table of pairwise exchange rates used to convert
Money between currencies. Rates are stored per directed pair; the inverse
direction is derived on lookup instead of being stored.

Files that USE this module:
- money_problem.domain.portfolio (Portfolio.evaluate converts through a bank)
- money_problem.application.bank_loader (builds a Bank from settings)
- tests.test_bank, tests.test_portfolio (unit tests)

Files that this module USES:
- money_problem.domain.models (Currency, Money)
- money_problem.domain.errors (NoRateFoundError)
"""
from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Tuple

from money_problem.domain.errors import NoRateFoundError
from money_problem.domain.models import Currency, Money

logger = logging.getLogger(__name__)

Pair = Tuple[Currency, Currency]


class Bank:
    """
    Exchange rate table keyed by (from, to) currency pairs.

    A stored rate r for (A, B) means 1 A == r B. When (A, B) is not stored
    but (B, A) is, the rate resolves to 1/r unless ``derive_inverse`` is off.
    """

    def __init__(self, rates: Optional[Mapping[Pair, float]] = None, derive_inverse: bool = True):
        """
        Initialize the bank.

        Args:
            rates: Optional seed rates keyed by (from, to)
            derive_inverse: Resolve missing pairs from the reverse entry (default: True)
        """
        self._rates: Dict[Pair, float] = dict(rates or {})
        self.derive_inverse = derive_inverse

    @classmethod
    def with_exchange_rate(
        cls,
        from_currency: Currency,
        to_currency: Currency,
        rate: float,
        derive_inverse: bool = True,
    ) -> Bank:
        """Create a bank seeded with exactly one directed rate."""
        return cls({(from_currency, to_currency): rate}, derive_inverse=derive_inverse)

    @property
    def rates(self) -> Dict[Pair, float]:
        """Copy of the stored directed rates."""
        return dict(self._rates)

    def add_exchange_rate(self, from_currency: Currency, to_currency: Currency, rate: float) -> None:
        """Insert or overwrite the directed rate for (from_currency, to_currency)."""
        previous = self._rates.get((from_currency, to_currency))
        self._rates[(from_currency, to_currency)] = rate
        if previous is None:
            logger.debug("Added exchange rate %s->%s = %s", from_currency, to_currency, rate)
        else:
            logger.debug("Replaced exchange rate %s->%s: %s -> %s", from_currency, to_currency, previous, rate)

    def rate(self, from_currency: Currency, to_currency: Currency) -> float:
        """
        Resolve the factor converting one unit of from_currency into to_currency.

        Raises:
            NoRateFoundError: If no direct or derivable rate exists
        """
        factor, inverted = self._lookup(from_currency, to_currency)
        return 1 / factor if inverted else factor

    def convert(self, money: Money, to_currency: Currency) -> Money:
        """
        Convert money into to_currency.

        Args:
            money: Amount to convert
            to_currency: Target currency

        Returns:
            ``money`` itself when already in to_currency, else a new Money

        Raises:
            NoRateFoundError: For the requested (money.currency, to_currency) pair
        """
        if money.currency == to_currency:
            return money
        factor, inverted = self._lookup(money.currency, to_currency)
        if inverted:
            return Money(money.amount / factor, to_currency)
        return Money(money.amount * factor, to_currency)

    def _lookup(self, from_currency: Currency, to_currency: Currency) -> Tuple[float, bool]:
        """
        Find the stored rate serving (from_currency, to_currency).

        Returns:
            (factor, inverted) where inverted means the factor is the stored
            (to_currency, from_currency) rate and must be divided by

        Raises:
            NoRateFoundError: If no direct or derivable rate exists
        """
        if from_currency == to_currency:
            return 1.0, False
        direct = self._rates.get((from_currency, to_currency))
        if direct is not None:
            return direct, False
        if self.derive_inverse:
            reverse = self._rates.get((to_currency, from_currency))
            # a zero rate has no reciprocal
            if reverse:
                return reverse, True
        raise NoRateFoundError(from_currency, to_currency)

    def __repr__(self) -> str:
        return f"Bank(rates={self._rates!r}, derive_inverse={self.derive_inverse})"
