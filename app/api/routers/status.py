"""Status endpoint router composition for the service root route."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import AppSettings
from app.domain import domain_build_status_response


def api_create_status_router(settings: AppSettings) -> APIRouter:
    """Create the router exposing the liveness and version payload.

    The reported environment is resolved from settings when the router is
    created, so request handling only composes the response.

    Args:
        settings: Validated application settings loaded at startup.

    Returns:
        APIRouter: Router exposing the `/` endpoint.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    environment_name = settings.environment_name
    router = APIRouter(tags=["status"])

    @router.get("/")
    def api_service_status() -> JSONResponse:
        """Return the service liveness payload.

        Returns:
            JSONResponse: Message, version and environment of the running service.
        """

        payload = domain_build_status_response(environment_name=environment_name).to_payload()
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
