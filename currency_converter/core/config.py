from functools import lru_cache
from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_RATE_SOURCES = {"static", "external-http"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, RATE_SOURCE, HTTP_TIMEOUT_SECONDS).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Rate source selection
    # Allowed: 'static' (built-in EUR-based table), 'external-http' (exchangerate-api style endpoint)
    rate_source: str = "static"

    # External HTTP rate source; final path appends the source ISO code
    exchange_api_base_url: AnyHttpUrl = "https://api.exchangerate-api.com/v4/latest"
    http_timeout_seconds: float = 5.0
    # 0 = single attempt per lookup
    http_retries: int = 0

    def init_post_load(self) -> None:
        """Normalize and validate derived fields."""
        self.rate_source = self.rate_source.strip().lower()
        if self.rate_source not in ALLOWED_RATE_SOURCES:
            raise ValueError(
                f"Unsupported rate_source '{self.rate_source}'. Allowed: {sorted(ALLOWED_RATE_SOURCES)}"
            )
        if self.http_retries < 0:
            raise ValueError("http_retries must be >= 0")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
