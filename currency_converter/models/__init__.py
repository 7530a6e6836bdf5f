"""Domain models for the currency converter."""

from .currency import (
    Currency,
    CurrencyIsoCode,
    iso_code_for,
    currency_for,
)  # re-export
from .money import Money
from .schemas import MoneyIn, MoneyOut, SumRequest

__all__ = [
    "Currency",
    "CurrencyIsoCode",
    "iso_code_for",
    "currency_for",
    "Money",
    "MoneyIn",
    "MoneyOut",
    "SumRequest",
]
