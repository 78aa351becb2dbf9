"""FastAPI application entry point"""

from collections.abc import AsyncGenerator, Iterable
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from rest_errors import __version__
from rest_errors.api import system as system_router
from rest_errors.core.config import get_settings
from rest_errors.core.middleware import setup_exception_handlers
from rest_errors.shared.logging import get_logger, setup_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    settings = get_settings()
    setup_logger()
    logger.info(
        f"Starting {settings.app.name}...",
        environment=settings.app.environment,
        validate_error_details=settings.validate_error_details,
    )

    yield

    logger.info("Shutting down...")


def create_app(routers: Iterable[APIRouter] = ()) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        routers: Extra API routers, included under the /api prefix.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=__version__,
        debug=settings.app.debug,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.app.debug else None,
        redoc_url="/api/redoc" if settings.app.debug else None,
        openapi_url="/api/openapi.json" if settings.app.debug else None,
    )

    for router in routers:
        app.include_router(router, prefix="/api")

    # System router (no /api prefix - accessible at root)
    app.include_router(system_router.router)

    # Error normalizer goes last, after every route is registered
    setup_exception_handlers(app)

    return app


# Create the application instance
app = create_app()
