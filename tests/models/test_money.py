import dataclasses

import pytest

from currency_converter.models.currency import (
    Currency,
    CurrencyIsoCode,
    currency_for,
    iso_code_for,
)
from currency_converter.models.money import Money


def test_money_equality():
    assert Money(2, Currency.DOLLAR) == Money(2.0, Currency.DOLLAR)
    assert Money(2, Currency.DOLLAR) != Money(2, Currency.EURO)
    assert Money(2, Currency.DOLLAR) != Money(3, Currency.DOLLAR)


def test_money_is_immutable():
    money = Money(1, Currency.POUND)

    with pytest.raises(dataclasses.FrozenInstanceError):
        money.amount = 5  # type: ignore[misc]


def test_money_allows_any_sign():
    assert Money(-10.5, Currency.EURO).amount == -10.5


@pytest.mark.parametrize(
    "currency, code",
    [
        (Currency.EURO, CurrencyIsoCode.EUR),
        (Currency.DOLLAR, CurrencyIsoCode.USD),
        (Currency.POUND, CurrencyIsoCode.GBP),
    ],
)
def test_iso_code_mapping_is_bijective(currency, code):
    assert iso_code_for(currency) is code
    assert currency_for(code) is currency


def test_every_currency_has_distinct_code():
    codes = [iso_code_for(c) for c in Currency]

    assert len(set(codes)) == len(list(Currency)) == len(list(CurrencyIsoCode))


def test_currency_for_accepts_lowercase_strings():
    assert currency_for(" usd ") is Currency.DOLLAR


def test_currency_for_unknown_code():
    with pytest.raises(ValueError, match="unsupported currency code"):
        currency_for("XXX")
