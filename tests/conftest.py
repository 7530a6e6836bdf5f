import pytest

from currency_converter.core.config import get_settings
from currency_converter.models.currency import CurrencyIsoCode
from currency_converter.services.rates.base import RateSource


class FakeRateSource(RateSource):
    """Rate source with fixed rates keyed by (source, target) ISO codes."""

    def __init__(self, rates=None, default=1.0):
        self.rates = dict(rates or {})
        self.default = default

    def get_rate(self, source_code, target_code):
        return self.rates.get((source_code, target_code), self.default)


@pytest.fixture
def fake_source():
    return FakeRateSource(
        {
            (CurrencyIsoCode.USD, CurrencyIsoCode.EUR): 0.8,
            (CurrencyIsoCode.GBP, CurrencyIsoCode.EUR): 1.2,
        }
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    """Keep cached settings and stray env vars from leaking between tests."""
    for var in ("RATE_SOURCE", "DEBUG", "HTTP_RETRIES", "EXCHANGE_API_BASE_URL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
