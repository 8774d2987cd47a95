"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import uvicorn
from loguru import logger

from app.bootstrap import bootstrap_create_application
from app.config import SettingsLoadError, config_load_settings
from app.logger_config import logging_configure


def main() -> None:
    """Start the status service with validated startup configuration.

    Returns:
        None: This function blocks until the server is stopped.

    Raises:
        SystemExit: Raised with status 1 when configuration validation fails or
            when uvicorn cannot bind the configured port.
    """

    logging_configure()
    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        logger.error(str(error))
        raise SystemExit(1) from error

    logging_configure(level=settings.log_level)
    application = bootstrap_create_application(settings=settings)
    logger.info(
        "Server running on http://{}:{} (environment: {})",
        settings.application_host,
        settings.application_port,
        settings.environment_name,
    )
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
