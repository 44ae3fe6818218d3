"""
Response rendering and exception handlers.

Success and error bodies come in two formats, chosen by
``Settings.use_envelope``:

* bare: the resource or list itself, and ``{"error": ..., "code": ...}``
  for failures;
* envelope: ``{"success": true, "data": ...}`` and
  ``{"success": false, "error": {"message": ..., "code": ...}}``.

``register_exception_handlers`` installs handlers for the contact
error taxonomy, for malformed request bodies and a catch‑all that
turns unexpected exceptions into a logged 500 response.
"""

import logging
import time
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings
from .exceptions import ContactAPIError, InvalidBodyError


logger = logging.getLogger(__name__)


def success_body(settings: Settings, data: Any) -> Any:
    data = jsonable_encoder(data)
    if settings.use_envelope:
        return {"success": True, "data": data}
    return data


def error_body(settings: Settings, message: str, code: str) -> dict:
    if settings.use_envelope:
        return {"success": False, "error": {"message": message, "code": code}}
    return {"error": message, "code": code}


def render(settings: Settings, data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Build a JSON response for a successful operation."""
    return JSONResponse(status_code=status_code, content=success_body(settings, data))


def render_error(settings: Settings, exc: ContactAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(settings, exc.message, exc.code))


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach the error handlers used by every route of ``app``."""

    @app.exception_handler(ContactAPIError)
    async def contact_error_handler(request: Request, exc: ContactAPIError) -> JSONResponse:
        logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
        return render_error(settings, exc)

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s %s -> malformed request: %s", request.method, request.url.path, exc.errors())
        return render_error(settings, InvalidBodyError())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
        return render_error(settings, ContactAPIError())


def register_request_logging(app: FastAPI) -> None:
    """Log method, path, status and duration of every request."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s %s completed in %.1f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
