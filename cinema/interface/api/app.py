"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from cinema.config import Settings
from cinema.interface.api.routes import comments, health, stats
from cinema.interface.error import request_validation_handler, unhandled_error_handler
from cinema.util.di.container import create_container, setup_di
from cinema.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does it and passes a container with mock providers.

    Args:
        container: DI container (production container when omitted)
    """
    settings = Settings()
    owns_container = container is None
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        yield
        # Callers that pass a container close it themselves.
        if owns_container:
            await container.close()

    app_instance = FastAPI(
        lifespan=lifespan,
        title="Cinema API",
        description="Backend API for the movie catalog and its threaded comments",
        version=SERVICE_VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(RequestValidationError, request_validation_handler)
    app_instance.add_exception_handler(Exception, unhandled_error_handler)

    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(stats.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
