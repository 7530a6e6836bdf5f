from __future__ import annotations
from typing import List
from pydantic import BaseModel, Field, field_validator

from .currency import CurrencyIsoCode, currency_for, iso_code_for
from .money import Money


def _upper_code(v: object) -> object:
    if isinstance(v, str):
        return v.strip().upper()
    return v


class MoneyIn(BaseModel):
    amount: float = Field(..., description="Amount in the given currency")
    currency: CurrencyIsoCode = Field(..., description="ISO code (e.g. USD)")

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v: object) -> object:
        return _upper_code(v)

    def to_money(self) -> Money:
        return Money(self.amount, currency_for(self.currency))


class SumRequest(BaseModel):
    target: CurrencyIsoCode = Field(..., description="Currency of the result")
    amounts: List[MoneyIn] = Field(default_factory=list)

    @field_validator("target", mode="before")
    @classmethod
    def normalize_target(cls, v: object) -> object:
        return _upper_code(v)


class MoneyOut(BaseModel):
    amount: float
    currency: CurrencyIsoCode

    @classmethod
    def from_money(cls, money: Money) -> "MoneyOut":
        return cls(amount=money.amount, currency=iso_code_for(money.currency))
