"""
Bank Loader - Build a Rate Table from Configuration

Files that USE this module:
- money_problem.adapters.persistence.in_memory (InMemoryBankRepository.from_settings)
- tests.test_settings (TestBuildBank unit tests)

Files that this module USES:
- money_problem.config (Settings with configured rate entries)
- money_problem.domain.bank (Bank)
"""
from __future__ import annotations

import logging
from typing import Optional

from money_problem.config import Settings
from money_problem.domain.bank import Bank

logger = logging.getLogger(__name__)


def build_bank(config: Optional[Settings] = None) -> Bank:
    """
    Create a Bank seeded with every configured exchange rate.

    Args:
        config: Settings to read from (defaults to the global settings)

    Returns:
        Bank holding the configured directed rates; later entries for the
        same pair overwrite earlier ones
    """
    if config is None:
        from money_problem.config import settings as config

    bank = Bank(derive_inverse=config.derive_inverse_rates)
    entries = config.rate_entries
    for from_currency, to_currency, rate in entries:
        bank.add_exchange_rate(from_currency, to_currency, rate)

    logger.info(
        "Loaded %d exchange rate(s) from configuration (derive inverse: %s)",
        len(entries),
        config.derive_inverse_rates,
    )
    return bank
