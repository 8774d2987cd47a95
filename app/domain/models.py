"""Typed domain models shared across runtime layers.

This module provides the status contract returned by the service root route.
"""

from dataclasses import asdict, dataclass

SERVICE_MESSAGE = "Ticket Booking Service is up and running!"
SERVICE_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT_NAME = "production"


@dataclass(frozen=True)
class StatusResponse:
    """Liveness payload returned by the service root route.

    Attributes:
        message: Human-readable liveness message.
        version: Semantic version of the running service.
        environment: Runtime environment label.
    """

    message: str
    version: str
    environment: str

    def to_payload(self) -> dict[str, str]:
        """Return the JSON-serializable representation of this response.

        Returns:
            dict[str, str]: Mapping with `message`, `version` and `environment` keys.
        """

        return asdict(self)


def domain_build_status_response(environment_name: str) -> StatusResponse:
    """Build the status response for the configured environment.

    Args:
        environment_name: Runtime environment label resolved at startup.

    Returns:
        StatusResponse: Response carrying fixed message and version values.
    """

    return StatusResponse(
        message=SERVICE_MESSAGE,
        version=SERVICE_VERSION,
        environment=environment_name,
    )
