"""
Evaluate Portfolio Use Case - Application Service

This module orchestrates a portfolio evaluation: it fetches the rate table
and the portfolio from their repositories, evaluates the portfolio in the
requested currency and maps the outcome to an application-level result.

Files that USE this module:
- tests.test_evaluate_portfolio (unit tests)

Files that this module USES:
- money_problem.domain.portfolio (Portfolio, Converter)
- money_problem.domain.models (Currency, Money)
- money_problem.domain.errors (MissingExchangeRatesError)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from money_problem.domain.errors import MissingExchangeRatesError
from money_problem.domain.models import Currency, Money
from money_problem.domain.portfolio import Converter, Portfolio

logger = logging.getLogger(__name__)


class UseCaseError(Exception):
    """Raised when a use case cannot produce a result."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BankRepository(Protocol):
    """Port giving access to the current rate table, if any."""
    def get_bank(self) -> Optional[Converter]:
        ...


class PortfolioRepository(Protocol):
    """Port giving access to the portfolio to evaluate."""
    def get(self) -> Portfolio:
        ...


@dataclass(frozen=True)
class EvaluatePortfolio:
    """Command: evaluate the stored portfolio in ``currency``."""
    currency: Currency


@dataclass(frozen=True)
class EvaluationResult:
    """
    Result of a successful evaluation.

    Attributes:
        amount: Total value of the portfolio
        currency: Currency the total is expressed in
    """
    amount: float
    currency: Currency

    @classmethod
    def from_money(cls, money: Money) -> EvaluationResult:
        return cls(money.amount, money.currency)


class EvaluatePortfolioUseCase:
    def __init__(self, bank_repository: BankRepository, portfolio_repository: PortfolioRepository):
        self.bank_repository = bank_repository
        self.portfolio_repository = portfolio_repository

    def invoke(self, command: EvaluatePortfolio) -> EvaluationResult:
        """
        Evaluate the stored portfolio.

        Args:
            command: EvaluatePortfolio naming the target currency

        Returns:
            EvaluationResult with the total amount

        Raises:
            UseCaseError: If no bank is defined or exchange rates are missing
        """
        bank = self.bank_repository.get_bank()
        if bank is None:
            logger.error("Cannot evaluate portfolio in %s: no bank defined", command.currency)
            raise UseCaseError("No bank defined")

        portfolio = self.portfolio_repository.get()
        try:
            money = portfolio.evaluate(bank, command.currency)
        except MissingExchangeRatesError as e:
            raise UseCaseError(str(e)) from e

        logger.info("Portfolio evaluated: %s", money)
        return EvaluationResult.from_money(money)
