"""Error Handlers — the terminal error responder for the API.

Invariants:
    - Every failure becomes exactly one Error Envelope response
    - Failure always logged (with traceback) before the response is built
    - HTTPException → its own status/detail; RequestValidationError → 400
    - Anything else reaches ErrorResponderMiddleware, which calls error_response

Design Decisions:
    - Unhandled exceptions caught in a middleware, not an Exception handler:
      Starlette's ServerErrorMiddleware re-raises after responding and sits
      outside the security-header middleware
"""

import logging
from collections.abc import Mapping

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_starter.core.error_envelope import build_error_envelope
from api_starter.core.errors import BadRequestError

logger = logging.getLogger(__name__)


def error_response(
    request: Request, exc: BaseException, is_development: bool,
) -> JSONResponse:
    """Log the failure and convert it into the Error Envelope."""
    status_code, body = build_error_envelope(exc, is_development)
    logger.error(
        f"Error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": status_code,
            "error_code": getattr(exc, "code", None),
        },
    )
    return JSONResponse(
        status_code=status_code,
        content=body,
        headers=_exception_headers(exc),
    )


def _exception_headers(exc: BaseException) -> Mapping[str, str] | None:
    headers = getattr(exc, "headers", None)
    return headers if isinstance(headers, Mapping) else None


def register_error_handlers(app: FastAPI, is_development: bool) -> None:
    """Register HTTP and validation error handlers on the FastAPI app."""
    _register_http_error_handler(app, is_development)
    _register_validation_error_handler(app, is_development)


def _register_http_error_handler(app: FastAPI, is_development: bool) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(request, exc, is_development)


def _register_validation_error_handler(
    app: FastAPI, is_development: bool,
) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body/params rejected by Pydantic — reported as a 400."""
        error = BadRequestError()
        error.__cause__ = exc
        return error_response(request, error, is_development)
