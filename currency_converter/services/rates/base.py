from __future__ import annotations

"""Rate source abstraction.

Every source (built-in table, HTTP API, test fakes) subclasses RateSource so
the converter depends on one explicit interface.
"""
from abc import ABC, abstractmethod

from currency_converter.models.currency import CurrencyIsoCode


class RateSource(ABC):
    @abstractmethod
    def get_rate(
        self, source_code: CurrencyIsoCode, target_code: CurrencyIsoCode
    ) -> float:
        """Return units of target_code per 1 unit of source_code.

        Implementations raise RateLookupError (or a subclass) when no rate can
        be produced.
        """
        raise NotImplementedError
