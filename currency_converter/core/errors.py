from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
import logging

logger = logging.getLogger("currency_converter.errors")


class RateLookupError(Exception):
    """A rate source could not produce a rate."""


class UnsupportedCurrencyPairError(RateLookupError):
    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"No rate available for {source} -> {target}")


def http_error_handler(request: Request, exc):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error, detail = "not_found", f"No route for {request.method} {request.url.path}"
    else:
        error, detail = "http_error", exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error, "detail": detail},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_errors(exc),
        },
    )


def rate_lookup_error_handler(request: Request, exc: RateLookupError):  # type: ignore
    logger.warning("rate lookup failed: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "rate_lookup_failed",
            "detail": str(exc),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # pydantic v2 may put the raw exception object under "ctx"
    return [
        {k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()
    ]
