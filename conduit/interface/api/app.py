"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from conduit.config import Settings
from conduit.interface.api.error_handlers import register_error_handlers
from conduit.interface.api.routes import (
    articles,
    comments,
    health,
    profiles,
    tags,
    users,
)
from conduit.util.di.container import create_container, setup_di
from conduit.util.observability import instrument_fastapi

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Collect every API route under the ``/api`` prefix."""
    api = APIRouter(prefix=API_PREFIX)
    api.include_router(users.router)
    api.include_router(profiles.router)
    api.include_router(articles.router)
    api.include_router(comments.router)
    api.include_router(tags.router)
    return api


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use; the production container by default

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Conduit API",
        description="Backend API for Conduit - a social publishing platform",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(create_api_router())

    return app_instance
