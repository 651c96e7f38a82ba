"""
Money Tests - Unit Tests for Money and Currency Value Objects

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- money_problem.domain.models (Money, Currency, factory helpers)
- money_problem.domain.errors (CurrencyMismatchError)
- pytest (testing framework)
"""
import dataclasses

import pytest  # Testing framework for writing and running tests

from money_problem.domain.errors import CurrencyMismatchError, DomainError
from money_problem.domain.models import Currency, Money, dollars, euros, korean_wons


class TestCurrency:
    def test_values_are_iso_codes(self):
        assert Currency.USD.value == "USD"
        assert Currency.EUR.value == "EUR"
        assert Currency.KRW.value == "KRW"

    def test_str(self):
        assert str(Currency.KRW) == "KRW"

    def test_lookup_by_code(self):
        assert Currency("EUR") is Currency.EUR


class TestMoney:
    def test_factories(self):
        assert dollars(5) == Money(5, Currency.USD)
        assert euros(10) == Money(10, Currency.EUR)
        assert korean_wons(1100) == Money(1100, Currency.KRW)

    def test_zero(self):
        assert Money.zero(Currency.EUR) == euros(0)

    def test_equality_needs_amount_and_currency(self):
        assert dollars(5) == dollars(5.0)
        assert dollars(5) != euros(5)
        assert dollars(5) != dollars(6)

    def test_is_immutable(self):
        money = dollars(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            money.amount = 10

    def test_add_same_currency(self):
        assert dollars(5).add(dollars(10)) == dollars(15)
        assert dollars(5) + dollars(10) == dollars(15)

    def test_add_returns_new_instance(self):
        five = dollars(5)
        five + dollars(1)
        assert five == dollars(5)

    def test_add_negative_amount(self):
        assert euros(5) + euros(-7.5) == euros(-2.5)

    def test_add_different_currencies_raises(self):
        with pytest.raises(CurrencyMismatchError, match="Cannot add EUR to USD"):
            dollars(5) + euros(10)

    def test_mismatch_is_domain_error(self):
        assert issubclass(CurrencyMismatchError, DomainError)

    def test_str(self):
        assert str(dollars(21.8)) == "21.8 USD"
