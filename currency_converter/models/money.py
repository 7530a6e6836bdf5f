from __future__ import annotations

from dataclasses import dataclass

from .currency import Currency


@dataclass(frozen=True)
class Money:
    amount: float
    currency: Currency
