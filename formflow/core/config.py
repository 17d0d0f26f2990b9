"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables and is
passed explicitly into the components that need it. Nothing in the form
engine reads these values implicitly.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class CredentialsConfig(BaseModel):
    """Default credentials used to prefill the sign-in form.

    Useful for development builds; both values are empty in production.
    """

    phone: str = Field(default="", description="Phone number to prefill.")
    password: str = Field(default="", description="Password to prefill.")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file. Nested values use a double
    underscore, e.g. ``CREDENTIALS__PHONE``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Segmentation
    highlight_pattern: str = Field(
        default="Bfast",
        description="Regular expression for tokens highlighted in translated phrases.",
    )

    # Sign-in
    credentials: CredentialsConfig = Field(
        default_factory=CredentialsConfig,
        description="Credentials injected as initial sign-in form values.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for info.log/error.log. Console only when unset.",
    )
    install_log_handlers: bool = Field(
        default=False,
        description="Replace root logger handlers when logging is configured.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.getLogger("formflow").setLevel(level)

        if self.install_log_handlers:
            from formflow.core.logging_config import setup_logging

            setup_logging(self)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
