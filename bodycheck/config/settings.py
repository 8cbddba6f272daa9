"""Library settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Validation settings loaded from environment variables."""

    # Rule handling
    strict_rules: bool = False  # reject unknown condition tokens when describing a record type

    # Diagnostics
    password_diagnostics: bool = True

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BODYCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = str(v).upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got {level}")
        return level


def configure_logging(config: Settings | None = None) -> None:
    """Apply the configured log level to the package logger.

    The package never installs handlers itself; records propagate to whatever
    the host application configured.
    """
    config = config or settings
    logging.getLogger("bodycheck").setLevel(config.log_level)
    logger.debug(f"bodycheck log level set to {config.log_level}")


settings = Settings()
