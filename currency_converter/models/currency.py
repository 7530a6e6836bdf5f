"""Currency enumeration and its ISO-code lookup table.

`Currency` is what callers work with; `CurrencyIsoCode` is what rate sources
understand. The two are kept as a strict one-to-one mapping.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict


class Currency(Enum):
    EURO = "euro"
    DOLLAR = "dollar"
    POUND = "pound"


class CurrencyIsoCode(str, Enum):
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"


_ISO_CODES: Dict[Currency, CurrencyIsoCode] = {
    Currency.EURO: CurrencyIsoCode.EUR,
    Currency.DOLLAR: CurrencyIsoCode.USD,
    Currency.POUND: CurrencyIsoCode.GBP,
}
_CURRENCIES: Dict[CurrencyIsoCode, Currency] = {v: k for k, v in _ISO_CODES.items()}

if len(_CURRENCIES) != len(_ISO_CODES) or set(_ISO_CODES) != set(Currency):
    raise RuntimeError("Currency <-> ISO code table must be a bijection")


def iso_code_for(currency: Currency) -> CurrencyIsoCode:
    return _ISO_CODES[currency]


def currency_for(code: CurrencyIsoCode | str) -> Currency:
    if not isinstance(code, CurrencyIsoCode):
        try:
            code = CurrencyIsoCode(str(code).strip().upper())
        except ValueError:
            raise ValueError(f"unsupported currency code '{code}'") from None
    return _CURRENCIES[code]
