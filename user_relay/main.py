"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (users relay, health)
- Error handlers (centralized error-to-envelope mapping)
- Response headers middleware (CORS, security headers)
- Rate limiting
- Logging configuration
- The shared upstream HTTP client (lifespan-scoped)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from user_relay.core.config import settings
from user_relay.interfaces.health import router as health_router
from user_relay.interfaces.users.router import router as users_router
from user_relay.shared.errors.handlers import register_error_handlers
from user_relay.shared.logging import configure_logging
from user_relay.shared.security.headers import ResponseHeadersMiddleware
from user_relay.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: own the upstream client for the app's lifetime."""
    async with httpx.AsyncClient(
        timeout=settings.upstream_timeout_seconds
    ) as http_client:
        app.state.http_client = http_client
        logger.info("Relaying /users/ to %s", settings.upstream_users_url)
        yield
    logger.info("Upstream client closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Response Headers ---
    app.add_middleware(ResponseHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()
