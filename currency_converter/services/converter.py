from __future__ import annotations

"""Multi-currency summation.

Adds up Money values expressed in any supported currency into a single Money
in the requested target currency. Rates come from an injected RateSource,
treated as a billable call: within one `sum` call each distinct foreign
currency is looked up at most once. Nothing is remembered between calls.

Rate source errors propagate unchanged to the caller.
"""
import logging
from typing import Dict

from currency_converter.models.currency import Currency, iso_code_for
from currency_converter.models.money import Money
from currency_converter.services.rates.base import RateSource

logger = logging.getLogger("currency_converter.converter")


class CurrencyConverter:
    def __init__(self, rate_source: RateSource):
        self._rate_source = rate_source

    def sum(self, target: Currency, *amounts: Money) -> Money:
        if not amounts:
            return Money(0, target)

        rates: Dict[Currency, float] = {}
        total = 0
        for money in amounts:
            if money.currency == target:
                total += money.amount
                continue
            if money.currency not in rates:
                rates[money.currency] = self._lookup(money.currency, target)
            total += money.amount * rates[money.currency]
        return Money(total, target)

    def _lookup(self, source: Currency, target: Currency) -> float:
        source_code, target_code = iso_code_for(source), iso_code_for(target)
        fields = {"source": source_code.value, "target": target_code.value}
        logger.debug("rate lookup", extra=fields)
        rate = self._rate_source.get_rate(source_code, target_code)
        logger.debug("rate resolved", extra={**fields, "rate": rate})
        return rate
