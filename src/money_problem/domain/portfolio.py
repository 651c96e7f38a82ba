"""
Portfolio - Multi-Currency Money Aggregation

This module contains the Portfolio, an ordered collection of Money entries
that can be evaluated in any single currency against a rate table. An
evaluation converts every entry before deciding the outcome, so all missing
exchange rates are reported together.

Files that USE this module:
- money_problem.application.evaluate_portfolio (EvaluatePortfolioUseCase)
- money_problem.adapters.persistence.in_memory (InMemoryPortfolioRepository)
- tests.test_portfolio (unit tests)

Files that this module USES:
- money_problem.domain.models (Currency, Money)
- money_problem.domain.errors (NoRateFoundError, MissingExchangeRatesError)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Protocol, Tuple

from money_problem.domain.errors import MissingExchangeRatesError, NoRateFoundError
from money_problem.domain.models import Currency, Money

logger = logging.getLogger(__name__)


class Converter(Protocol):
    """Anything able to convert Money, raising NoRateFoundError when it cannot."""
    def convert(self, money: Money, to_currency: Currency) -> Money:
        ...


@dataclass(frozen=True)
class Conversion:
    """
    Outcome of converting a single portfolio entry.

    Exactly one of ``money`` and ``missing`` is set.
    """
    money: Optional[Money] = None
    missing: Optional[Tuple[Currency, Currency]] = None

    @property
    def succeeded(self) -> bool:
        return self.missing is None


class Portfolio:
    def __init__(self, *moneys: Money):
        self._moneys: List[Money] = list(moneys)

    def add(self, money: Money) -> None:
        self._moneys.append(money)

    def __iter__(self) -> Iterator[Money]:
        return iter(self._moneys)

    def __len__(self) -> int:
        return len(self._moneys)

    def evaluate(self, bank: Converter, to_currency: Currency) -> Money:
        """
        Sum every entry converted into to_currency.

        Args:
            bank: Rate table used for conversions (Bank or PivotBank)
            to_currency: Currency of the result

        Returns:
            Money holding the total in to_currency (zero for an empty portfolio)

        Raises:
            MissingExchangeRatesError: Listing every entry that could not be
                converted, in insertion order
        """
        conversions = [self._convert(bank, money, to_currency) for money in self._moneys]

        missing = [c.missing for c in conversions if not c.succeeded]
        if missing:
            error = MissingExchangeRatesError(missing)
            logger.warning("Portfolio evaluation in %s failed: %s", to_currency, error)
            raise error

        total = Money.zero(to_currency)
        for conversion in conversions:
            total = total.add(conversion.money)
        logger.debug("Evaluated %d entries to %s", len(conversions), total)
        return total

    @staticmethod
    def _convert(bank: Converter, money: Money, to_currency: Currency) -> Conversion:
        try:
            return Conversion(money=bank.convert(money, to_currency))
        except NoRateFoundError as e:
            return Conversion(missing=e.pair)

    def __repr__(self) -> str:
        return f"Portfolio({', '.join(map(str, self._moneys))})"
