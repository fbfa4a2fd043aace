"""Error Envelopes — failure → (status_code, JSON body), plus the not-found body.

Invariants:
    - PURE: no IO, no logging (the HTTP boundary logs before responding)
    - Status: exc.status → exc.status_code → exc.http_status → 500
    - Production body is exactly {"success": false, "error": "Internal server error"}
    - "stack" key present only in development; absent (never null) otherwise
"""

import traceback

from api_starter.core.errors import ApiStarterError

GENERIC_ERROR_MESSAGE = "Internal server error"
DEFAULT_STATUS = 500


def resolve_status(exc: BaseException) -> int:
    for attr in ("status", "status_code", "http_status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool) and value:
            return value
    return DEFAULT_STATUS


def resolve_message(exc: BaseException) -> str:
    if isinstance(exc, ApiStarterError):
        return exc.message
    detail = getattr(exc, "detail", None)
    if detail is not None:
        return str(detail)
    return str(exc) or type(exc).__name__


def format_stack(exc: BaseException) -> str:
    """Formatted traceback including any chained cause.

    An exception that was never raised renders as just "Type: message".
    """
    return "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__),
    ).strip()


def build_error_envelope(
    exc: BaseException, is_development: bool,
) -> tuple[int, dict]:
    status_code = resolve_status(exc)
    if not is_development:
        return status_code, {"success": False, "error": GENERIC_ERROR_MESSAGE}
    return status_code, {
        "success": False,
        "error": resolve_message(exc),
        "stack": format_stack(exc),
    }


def build_not_found_envelope(path: str, method: str) -> dict:
    return {"error": "Route not found", "path": path, "method": method}
