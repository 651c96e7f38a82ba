# src/money_problem/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for storing banks and portfolios:
- In-memory storage (process lifetime only)
"""

from money_problem.adapters.persistence.in_memory import (
    InMemoryBankRepository,
    InMemoryPortfolioRepository,
)

__all__ = [
    "InMemoryBankRepository",
    "InMemoryPortfolioRepository",
]
