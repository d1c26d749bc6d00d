"""Error taxonomy shared by the adapters, the aggregator and the API layer."""
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class UpstreamErrorKind(str, Enum):
    AUTH_MISSING = "auth_missing"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"


class MarketMovesError(Exception):
    """Base error carrying the HTTP status and the user-visible message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class InputError(MarketMovesError):
    """The caller sent no usable ticker."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing symbol"


class UpstreamError(MarketMovesError):
    """A required provider call failed or returned something unusable."""

    def __init__(self, kind: UpstreamErrorKind, message: str | None = None):
        self.kind = kind
        super().__init__(message)


class ConfigError(UpstreamError):
    """A required provider credential is not configured."""

    def __init__(self, message: str | None = None):
        super().__init__(UpstreamErrorKind.AUTH_MISSING, message)


async def marketmoves_error_handler(request: Request, exc: MarketMovesError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MarketMovesError, marketmoves_error_handler)
