"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from connector.config import Settings
from connector.interface.api.routes import auth, health, posts, profile, users
from connector.interface.api.security import TOKEN_HEADER
from connector.interface.error import register_error_handlers
from connector.util.di.container import create_container, setup_di
from connector.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Dev Connector API",
        description="Backend API for Dev Connector - developer profiles, posts, comments and likes",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", TOKEN_HEADER],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profile.router)
    app_instance.include_router(posts.router)

    return app_instance
