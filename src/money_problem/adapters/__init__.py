# src/money_problem/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains adapters implementing the application's ports:
- Persistence (storage)
"""

__all__ = []
