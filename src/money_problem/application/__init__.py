# src/money_problem/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through repository ports.
"""

from money_problem.application.bank_loader import build_bank
from money_problem.application.evaluate_portfolio import (
    BankRepository,
    EvaluatePortfolio,
    EvaluatePortfolioUseCase,
    EvaluationResult,
    PortfolioRepository,
    UseCaseError,
)

__all__ = [
    "build_bank",
    "BankRepository",
    "PortfolioRepository",
    "EvaluatePortfolio",
    "EvaluatePortfolioUseCase",
    "EvaluationResult",
    "UseCaseError",
]
