"""Domain models used across application layer boundaries."""

from .models import (
    DEFAULT_ENVIRONMENT_NAME,
    SERVICE_MESSAGE,
    SERVICE_VERSION,
    StatusResponse,
    domain_build_status_response,
)

__all__ = [
    "DEFAULT_ENVIRONMENT_NAME",
    "SERVICE_MESSAGE",
    "SERVICE_VERSION",
    "StatusResponse",
    "domain_build_status_response",
]
