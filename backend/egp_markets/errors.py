"""
Error taxonomy for the market data API.

InvalidInput and NotFound are raised by routers/builders and mapped to 400/404
by the handlers registered in main.create_app. Anything else escaping a route
is logged and reported as a generic 500 via failure_guard.
"""
from __future__ import annotations
import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MarketDataError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(MarketDataError):
    status_code = 400


class NotFound(MarketDataError):
    status_code = 404


class Unexpected(MarketDataError):
    status_code = 500


class InvalidArgument(ValueError):
    """Raised by the synthesizer for non-positive prices or point counts."""


class UpstreamError(Exception):
    """Third-party provider failure. Travels inside Err, never raised to routes."""


@contextmanager
def failure_guard(action: str):
    """Turn unexpected exceptions into Unexpected("Failed to <action>")."""
    try:
        yield
    except MarketDataError:
        raise
    except Exception as exc:
        logger.exception("Error trying to %s", action)
        raise Unexpected(f"Failed to {action}") from exc


async def _market_data_error_handler(request: Request, exc: MarketDataError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MarketDataError, _market_data_error_handler)
