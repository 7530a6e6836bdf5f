import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import conversions
from .services.converter import CurrencyConverter
from .services.rates.base import RateSource
from .services.rates.providers import make_rate_source


def create_app(
    settings_override: Settings | None = None, rate_source: RateSource | None = None
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    rate_source: inject a RateSource directly (tests, embedding); otherwise one
    is built from settings.rate_source.
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug)

    if rate_source is None:
        rate_source = make_rate_source(settings.rate_source, settings)
    logging.getLogger("currency_converter").info(
        "using rate source %s", type(rate_source).__name__
    )

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.converter = CurrencyConverter(rate_source)

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.RateLookupError, errors.rate_lookup_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    app.include_router(conversions.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
