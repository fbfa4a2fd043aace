"""API Starter — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery); not_found last
    - Settings resolved once and injected into middlewares and handlers
    - Middleware order (outermost first): security headers → origin
      policy → error responder → routes
    - Startup banner printed once via lifespan, before requests are served
"""

import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from api_starter.api.error_handlers import register_error_handlers
from api_starter.api.middleware import (
    ErrorResponderMiddleware,
    OriginPolicyMiddleware,
    SecurityHeadersMiddleware,
)
from api_starter.api.routes import health, not_found
from api_starter.config import Settings, get_settings
from api_starter.infrastructure.observability import setup_logging
from api_starter.infrastructure.startup_banner import display_server_info

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    mode = "development" if settings.is_development else "production"
    logger.info(f"{settings.app_name} starting in {mode} mode")
    display_server_info(settings.app_name, settings.port)
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    settings: Settings | None = None, routers: Sequence[APIRouter] = (),
) -> FastAPI:
    """Build the application. Extra routers are mounted before the 404 fallback."""
    settings = settings or get_settings()
    application = FastAPI(title=settings.app_name, lifespan=lifespan)
    application.state.settings = settings

    # Starlette wraps in reverse: the last middleware added runs first
    application.add_middleware(
        ErrorResponderMiddleware, is_development=settings.is_development,
    )
    application.add_middleware(
        OriginPolicyMiddleware,
        allowed_origins=settings.allowed_origin_set,
        is_development=settings.is_development,
    )
    application.add_middleware(SecurityHeadersMiddleware)

    application.include_router(health.router)
    for router in routers:
        application.include_router(router)
    application.include_router(not_found.router)

    register_error_handlers(application, settings.is_development)
    return application


app = create_app()
