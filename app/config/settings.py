"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.domain import DEFAULT_ENVIRONMENT_NAME

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the status service runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `application_port` reads from `APPLICATION_PORT`.

    Settings are loaded once at startup and are immutable afterwards.

    Attributes:
        environment_name: Runtime environment label reported by the status route.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Minimum level emitted by the application logger.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    environment_name: str = Field(default=DEFAULT_ENVIRONMENT_NAME)
    application_host: str = Field(default="0.0.0.0", min_length=1)
    application_port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    @field_validator("environment_name")
    @classmethod
    def _validate_environment_name(cls, value: str) -> str:
        # only an empty value counts as unset; anything else is reported as given
        if value == "":
            return DEFAULT_ENVIRONMENT_NAME
        return value

    @field_validator("application_host")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
