"""
Bank Tests - Unit Tests for the Directed Exchange Rate Table

This module tests rate lookup, conversion, derived inverse rates, and
the strict mode that only resolves stored directed pairs.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- money_problem.domain.bank (Bank)
- money_problem.domain.models (Currency, Money and factory helpers)
- money_problem.domain.errors (NoRateFoundError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from money_problem.domain.bank import Bank
from money_problem.domain.errors import NoRateFoundError
from money_problem.domain.models import Currency, Money, dollars, euros, korean_wons


@pytest.fixture
def bank():
    bank = Bank.with_exchange_rate(Currency.EUR, Currency.USD, 1.2)
    bank.add_exchange_rate(Currency.USD, Currency.KRW, 1100)
    return bank


class TestBankConstruction:
    def test_with_exchange_rate_seeds_one_rate(self):
        bank = Bank.with_exchange_rate(Currency.EUR, Currency.USD, 1.2)
        assert bank.rates == {(Currency.EUR, Currency.USD): 1.2}

    def test_empty_bank(self):
        assert Bank().rates == {}

    def test_seed_many_rates(self):
        bank = Bank({(Currency.EUR, Currency.USD): 1.2, (Currency.USD, Currency.KRW): 1100})
        assert bank.rate(Currency.USD, Currency.KRW) == 1100

    def test_add_exchange_rate_does_not_store_inverse(self, bank):
        assert (Currency.USD, Currency.EUR) not in bank.rates
        assert len(bank.rates) == 2

    def test_add_exchange_rate_overwrites(self, bank):
        bank.add_exchange_rate(Currency.EUR, Currency.USD, 1.3)
        assert bank.convert(euros(10), Currency.USD) == dollars(13)

    def test_rates_is_a_copy(self, bank):
        bank.rates.clear()
        assert len(bank.rates) == 2


class TestConvert:
    def test_same_currency_returns_money_unchanged(self, bank):
        money = korean_wons(42)
        assert bank.convert(money, Currency.KRW) is money

    def test_identity_needs_no_stored_rate(self):
        assert Bank().convert(euros(3), Currency.EUR) == euros(3)

    def test_direct_rate(self, bank):
        assert bank.convert(euros(10), Currency.USD) == dollars(12)

    def test_direct_rate_multiplies(self, bank):
        assert bank.convert(dollars(1), Currency.KRW) == korean_wons(1100)

    def test_derived_inverse_rate(self, bank):
        converted = bank.convert(dollars(12), Currency.EUR)
        assert converted == euros(12 / 1.2)
        assert converted.amount == pytest.approx(10)

    def test_derived_inverse_from_krw(self, bank):
        assert bank.convert(korean_wons(2200), Currency.USD) == dollars(2)

    def test_direct_rate_wins_over_inverse(self, bank):
        bank.add_exchange_rate(Currency.USD, Currency.EUR, 0.8)
        assert bank.convert(dollars(10), Currency.EUR) == euros(8)

    def test_missing_rate_raises(self, bank):
        with pytest.raises(NoRateFoundError) as exc_info:
            bank.convert(korean_wons(1), Currency.EUR)
        assert exc_info.value.pair == (Currency.KRW, Currency.EUR)
        assert str(exc_info.value) == "No exchange rate found for KRW->EUR"

    def test_missing_rate_reports_requested_direction(self, bank):
        with pytest.raises(NoRateFoundError, match="EUR->KRW"):
            bank.convert(euros(1), Currency.KRW)

    def test_zero_reverse_rate_is_not_derived(self):
        bank = Bank.with_exchange_rate(Currency.EUR, Currency.USD, 0)
        with pytest.raises(NoRateFoundError, match="USD->EUR"):
            bank.convert(dollars(1), Currency.EUR)

    def test_zero_direct_rate_still_converts(self):
        bank = Bank.with_exchange_rate(Currency.EUR, Currency.USD, 0)
        assert bank.convert(euros(10), Currency.USD) == dollars(0)

    def test_rates_are_not_chained(self, bank):
        # EUR->USD and USD->KRW exist, EUR->KRW still does not
        with pytest.raises(NoRateFoundError):
            bank.convert(euros(1), Currency.KRW)


class TestRate:
    def test_identity(self):
        assert Bank().rate(Currency.USD, Currency.USD) == 1

    def test_direct(self, bank):
        assert bank.rate(Currency.EUR, Currency.USD) == 1.2

    def test_inverse(self, bank):
        assert bank.rate(Currency.USD, Currency.EUR) == 1 / 1.2

    def test_missing(self, bank):
        with pytest.raises(NoRateFoundError):
            bank.rate(Currency.EUR, Currency.KRW)

    def test_zero_reverse_rate(self):
        bank = Bank.with_exchange_rate(Currency.EUR, Currency.USD, 0)
        with pytest.raises(NoRateFoundError, match="USD->EUR"):
            bank.rate(Currency.USD, Currency.EUR)

    @pytest.mark.parametrize("source, target", [
        (Currency.EUR, Currency.USD),
        (Currency.USD, Currency.EUR),
        (Currency.USD, Currency.KRW),
        (Currency.KRW, Currency.USD),
        (Currency.KRW, Currency.KRW),
    ])
    def test_agrees_with_convert(self, bank, source, target):
        converted = bank.convert(Money(1, source), target)
        assert converted.amount == pytest.approx(bank.rate(source, target))


class TestStrictBank:
    def test_inverse_not_derived(self):
        bank = Bank.with_exchange_rate(Currency.EUR, Currency.USD, 1.2, derive_inverse=False)
        with pytest.raises(NoRateFoundError, match="USD->EUR"):
            bank.convert(dollars(12), Currency.EUR)

    def test_direct_still_resolves(self):
        bank = Bank.with_exchange_rate(Currency.EUR, Currency.USD, 1.2, derive_inverse=False)
        assert bank.convert(euros(10), Currency.USD) == dollars(12)

    def test_identity_still_resolves(self):
        bank = Bank(derive_inverse=False)
        assert bank.rate(Currency.KRW, Currency.KRW) == 1
