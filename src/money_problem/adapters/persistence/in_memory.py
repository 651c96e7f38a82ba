"""
In-Memory Store - Repository Adapters

Process-local implementations of the application's repository ports.
Nothing here outlives the interpreter.

Files that USE this module:
- tests.test_evaluate_portfolio (wires the use case with these repositories)

Files that this module USES:
- money_problem.application.bank_loader (build_bank for from_settings)
- money_problem.domain.portfolio (Portfolio, Converter)
"""
from __future__ import annotations

from typing import Optional

from money_problem.application.bank_loader import build_bank
from money_problem.config import Settings
from money_problem.domain.portfolio import Converter, Portfolio


class InMemoryBankRepository:
    def __init__(self, bank: Optional[Converter] = None):
        self._bank = bank

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> InMemoryBankRepository:
        """Create a repository holding a Bank built from configuration."""
        return cls(build_bank(config))

    def get_bank(self) -> Optional[Converter]:
        return self._bank

    def save(self, bank: Converter) -> None:
        self._bank = bank


class InMemoryPortfolioRepository:
    def __init__(self, portfolio: Optional[Portfolio] = None):
        self._portfolio = portfolio if portfolio is not None else Portfolio()

    def get(self) -> Portfolio:
        return self._portfolio

    def save(self, portfolio: Portfolio) -> None:
        self._portfolio = portfolio
