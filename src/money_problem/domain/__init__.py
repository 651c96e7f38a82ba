# src/money_problem/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from money_problem.domain.models import (
    Currency,
    ExchangeRate,
    Money,
    dollars,
    euros,
    korean_wons,
)
from money_problem.domain.bank import Bank
from money_problem.domain.pivot_bank import PivotBank
from money_problem.domain.portfolio import Conversion, Converter, Portfolio
from money_problem.domain.errors import (
    CurrencyMismatchError,
    DomainError,
    InvalidRateError,
    MissingExchangeRatesError,
    MissingExchangeRatesException,
    NoRateFoundError,
)

__all__ = [
    "Currency",
    "Money",
    "ExchangeRate",
    "dollars",
    "euros",
    "korean_wons",
    "Bank",
    "PivotBank",
    "Portfolio",
    "Conversion",
    "Converter",
    "DomainError",
    "CurrencyMismatchError",
    "InvalidRateError",
    "NoRateFoundError",
    "MissingExchangeRatesError",
    "MissingExchangeRatesException",
]
