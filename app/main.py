"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (CORS, headers, rate limiting)
- Logging configuration
- Database lifecycle (engine created at startup, disposed at shutdown)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import settings
from app.infrastructure.database import create_schema, dispose_database, init_database
from app.interfaces.health import router as health_router
from app.interfaces.items.router import router as items_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.errors.middleware import UnhandledErrorMiddleware
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open and close the shared database handle."""
    engine = init_database()
    if settings.auto_create_schema:
        create_schema(engine)
    logger.info(
        "%s %s started (environment=%s)",
        settings.project_name,
        settings.version,
        settings.environment,
    )

    yield

    dispose_database()
    logger.info("%s stopped", settings.project_name)


def create_app(rate_limiter: Optional[Limiter] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        rate_limiter: Limiter to install instead of the settings-driven one.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # Added first so it sits innermost: 500s still get the headers below.
    app.add_middleware(UnhandledErrorMiddleware)

    # --- Rate Limiting ---
    app.state.limiter = rate_limiter or limiter
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(
        SecurityHeadersMiddleware, enable_hsts=settings.is_production
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(items_router, prefix=API_PREFIX)

    return app


app = create_app()
