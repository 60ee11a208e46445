"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.version import APPLICATION_VERSION

DEVELOPMENT_ENVIRONMENT_NAME = "Development"
PRODUCTION_ENVIRONMENT_NAME = "Production"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP service runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `environment_name` reads from `ENVIRONMENT_NAME`.

    Attributes:
        environment_name: Runtime environment label reported by every endpoint.
        application_name: Human-readable application name.
        application_version: Version string reported by health and info endpoints.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        log_format: Log output format, `text` or `json`; derived from the environment when unset.
        https_redirect_enabled: Redirect plain HTTP requests to HTTPS when set.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="Production", min_length=1)
    application_name: str = Field(default="CI/CD POC Application", min_length=1)
    application_version: str | None = Field(default=APPLICATION_VERSION)
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    log_format: str | None = Field(default=None)
    https_redirect_enabled: bool = Field(default=False)

    @field_validator("environment_name", "application_name")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("application_version")
    @classmethod
    def _normalize_version(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log_level={value}")
        return normalized_value

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        normalized_value = value.strip().lower()
        if normalized_value not in {"text", "json"}:
            raise ValueError(f"unsupported log_format={value}")
        return normalized_value

    @property
    def resolved_log_format(self) -> str:
        """Return the effective log format.

        An explicit `log_format` wins. Otherwise `Production` logs JSON lines
        and every other environment logs human-readable text.

        Returns:
            str: `json` or `text`.
        """

        if self.log_format is not None:
            return self.log_format
        if self.environment_name.casefold() == PRODUCTION_ENVIRONMENT_NAME.casefold():
            return "json"
        return "text"

    @property
    def is_development(self) -> bool:
        """Return whether the runtime environment is `Development`.

        Returns:
            bool: True when the environment label matches case-insensitively.
        """

        return self.environment_name.casefold() == DEVELOPMENT_ENVIRONMENT_NAME.casefold()


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
