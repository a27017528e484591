"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from board.config import Settings
from board.interface.api.routes import health, ideas, votes
from board.util.di.container import create_container, setup_di
from board.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Disposes the engine and other APP-scoped resources
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container; the production container when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Idea Board API",
        description="Community idea board: submit ideas, vote once per idea, browse by popularity or recency",
        version="0.1.0",
        lifespan=lifespan,
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
        allow_credentials=True,  # Fingerprint and session cookies
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes (/ideas/stats is declared before /ideas/{idea_id})
    app_instance.include_router(health.router)
    app_instance.include_router(ideas.router)
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
