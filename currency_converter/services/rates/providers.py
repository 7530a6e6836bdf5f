from __future__ import annotations

"""Concrete rate sources and factory.

'StaticRateSource' serves cross rates from a fixed EUR-based table (offline use,
demos, smoke scripts). 'ExternalHTTPRateSource' asks an exchangerate-api style
endpoint for every lookup; it keeps no cache of its own.
"""
import json
import logging
import time
import urllib.error
import urllib.request
from typing import Any, Callable, Dict, Mapping, Optional

from .base import RateSource
from currency_converter.core.config import Settings, get_settings
from currency_converter.core.errors import RateLookupError, UnsupportedCurrencyPairError
from currency_converter.models.currency import CurrencyIsoCode

logger = logging.getLogger("currency_converter.rates")

# EUR per 1 unit of currency (placeholders, not market data)
_EUR_PER_UNIT: Dict[str, float] = {
    "EUR": 1.0,
    "USD": 0.92,
    "GBP": 1.17,
}


def _code(value: CurrencyIsoCode | str) -> str:
    if isinstance(value, CurrencyIsoCode):
        return value.value
    return str(value).strip().upper()


class StaticRateSource(RateSource):
    def __init__(self, eur_per_unit: Optional[Mapping[str, float]] = None):
        table = _EUR_PER_UNIT if eur_per_unit is None else eur_per_unit
        self._eur_per_unit = {k.upper(): v for k, v in table.items()}

    def get_rate(self, source_code, target_code) -> float:  # type: ignore[override]
        source, target = _code(source_code), _code(target_code)
        if source not in self._eur_per_unit or target not in self._eur_per_unit:
            raise UnsupportedCurrencyPairError(source, target)
        if source == target:
            return 1.0
        return self._eur_per_unit[source] / self._eur_per_unit[target]


class ExternalHTTPRateSource(RateSource):
    """Rate source backed by GET {base_url}/{SOURCE} -> {"rates": {CODE: rate}}.

    Every lookup is one request, plus up to `retries` further attempts on
    transport errors. Any failure, including a payload that does not carry a
    numeric rate for the target, surfaces as RateLookupError.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        retries: int = 0,
        backoff: float = 0.5,
        opener: Optional[Callable[..., Any]] = None,
    ):
        self._base_url = str(base_url).rstrip("/")
        self._timeout = timeout
        self._retries = retries
        self._backoff = backoff
        self._opener = opener or urllib.request.urlopen

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExternalHTTPRateSource":
        return cls(
            str(settings.exchange_api_base_url),
            timeout=settings.http_timeout_seconds,
            retries=settings.http_retries,
        )

    def get_rate(self, source_code, target_code) -> float:  # type: ignore[override]
        source, target = _code(source_code), _code(target_code)
        url = f"{self._base_url}/{source}"
        data = self._fetch_json(url)

        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise RateLookupError(f"malformed rates payload from {url}")
        if rates.get(target) is None:
            raise UnsupportedCurrencyPairError(source, target)
        try:
            rate = float(rates[target])
        except (TypeError, ValueError):
            raise RateLookupError(
                f"non-numeric rate for {source} -> {target}: {rates[target]!r}"
            ) from None
        logger.debug("fetched rate", extra={"source": source, "target": target, "rate": rate})
        return rate

    def _fetch_json(self, url: str) -> Any:
        last_err: object = None
        for attempt in range(self._retries + 1):
            if attempt:
                time.sleep(self._backoff * (2 ** (attempt - 1)))
            try:
                with self._opener(url, timeout=self._timeout) as resp:  # nosec B310
                    if resp.status < 400:
                        return json.loads(resp.read().decode("utf-8"))
                    last_err = f"HTTP {resp.status}"
            except (urllib.error.URLError, TimeoutError, ValueError) as e:  # ValueError for JSON decode
                last_err = e
            logger.debug(
                "rate fetch failed",
                extra={"url": url, "attempt": attempt + 1, "error": str(last_err)},
            )
        raise RateLookupError(f"rate fetch from {url} failed: {last_err}")


_SOURCE_REGISTRY: Dict[str, Callable[[Settings], RateSource]] = {
    "static": lambda settings: StaticRateSource(),
    "external-http": ExternalHTTPRateSource.from_settings,
}


def make_rate_source(kind: str, settings: Settings | None = None) -> RateSource:
    factory = _SOURCE_REGISTRY.get(kind)
    if not factory:
        raise ValueError(f"Unknown rate source kind '{kind}'")
    return factory(settings or get_settings())
