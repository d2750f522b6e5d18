"""Settings loaded from the environment and an optional ``.env`` file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from netorca_sdk.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "v1"
DEFAULT_REQUEST_TIMEOUT = 5


class Settings(BaseSettings):
    """Connection settings for :class:`netorca_sdk.NetOrcaClient`.

    Values come from ``API_URL``, ``API_KEY``, ``API_VERSION`` and
    ``REQUEST_TIMEOUT``. Process environment wins over the ``.env`` file.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    api_url: str = Field(default="", description="Base URL of the NetOrca API.")
    api_key: str = Field(default="", description="API key used for authentication.")
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        min_length=1,
        description="API version path segment.",
    )
    request_timeout: int = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        ge=0,
        description="Request timeout in seconds.",
    )

    @field_validator("api_version", "request_timeout", mode="before")
    @classmethod
    def blank_means_default(cls, value: object, info: ValidationInfo) -> object:
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value


def load_settings(env_file: str | Path | None = ".env") -> Settings:
    """Load settings, reading ``env_file`` first when it exists."""
    if env_file is not None and not Path(env_file).is_file():
        logger.warning("env file %s not found, using process environment only", env_file)
        env_file = None

    try:
        settings = Settings(_env_file=env_file)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc

    if "request_timeout" not in settings.model_fields_set:
        logger.info(
            "REQUEST_TIMEOUT not set, using default value of %d seconds",
            DEFAULT_REQUEST_TIMEOUT,
        )
    return settings
