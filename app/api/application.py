"""FastAPI application factory for the status service.

This module defines API application composition used by the runtime entrypoint.
"""

from fastapi import FastAPI

from app.config import AppSettings
from app.domain import SERVICE_VERSION

from .routers import api_create_status_router


def create_api_application(settings: AppSettings) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.

    Returns:
        FastAPI: Framework application instance exposing the status route.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    application = FastAPI(
        title="Ticket Booking Service",
        version=SERVICE_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(api_create_status_router(settings=settings))
    return application
