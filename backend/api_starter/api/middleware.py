"""HTTP Middlewares — security headers, terminal error boundary, origin policy.

Invariants:
    - Stack order (outermost first): SecurityHeaders → OriginPolicy → ErrorResponder
    - Security headers present on every response, error responses included
    - CORS headers for an allowed origin present on every response, error
      envelopes included
    - Denied origins answered through error_response with CorsOriginDeniedError
    - Middlewares receive configuration through their constructors
"""

import logging
from typing import AbstractSet

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from api_starter.api.error_handlers import error_response
from api_starter.core.errors import CorsOriginDeniedError
from api_starter.core.origin_policy import cors_response_headers, evaluate_origin

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds the hardening header set; headers a route already set are kept."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class ErrorResponderMiddleware(BaseHTTPMiddleware):
    """Last line of defence: any exception below becomes an Error Envelope."""

    def __init__(self, app, *, is_development: bool):
        super().__init__(app)
        self.is_development = is_development

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(request, exc, self.is_development)


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """Applies evaluate_origin to each request and answers CORS preflights."""

    def __init__(
        self, app, *, allowed_origins: AbstractSet[str], is_development: bool,
    ):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)
        self.is_development = is_development

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        decision = evaluate_origin(
            origin, self.allowed_origins, self.is_development,
        )
        if not decision.allowed:
            logger.warning(
                f"CORS blocked origin: {decision.reason}",
                extra={"origin": origin, "path": request.url.path},
            )
            return error_response(
                request, CorsOriginDeniedError(origin), self.is_development,
            )

        if request.method == "OPTIONS":
            response = Response(status_code=204)
        elif not origin:
            return await call_next(request)
        else:
            response = await call_next(request)
        response.headers.update(cors_response_headers(origin))
        response.headers.add_vary_header("Origin")
        return response
