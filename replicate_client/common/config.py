"""Configuration for the Replicate client.

Settings are read with ``pydantic_settings.BaseSettings`` so they can come
from keyword arguments, environment variables, or a ``.env`` file.

Environment variables
- ``REPLICATE_API_TOKEN`` (``REPLICATE_API_KEY`` is accepted as well)
- ``REPLICATE_BASE_URL``
- ``REPLICATE_TIMEOUT``
- ``REPLICATE_LOG_LEVEL`` / ``REPLICATE_LOG_FORMAT``

Usage
- ``config = ReplicateConfig()`` to read the environment
- ``config = ReplicateConfig(api_token="r8_...")`` to pass values explicitly

A config is frozen after construction, so one instance can be shared by any
number of concurrent requests.
"""

from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.replicate.com/v1"


class ReplicateConfig(BaseSettings):
    """Connection settings shared by every request.

    Parameters
    - api_token: Bearer token sent with each call
    - base_url: API root; requests append their path to it
    - timeout: Seconds passed to httpx; ``None`` keeps httpx's own default
    - log_level, log_format: Consumed by ``configure_logging``

    Raises
    - ``ConfigurationError`` if the token is missing, empty, or contains
      whitespace
    """

    model_config = SettingsConfigDict(
        env_prefix="REPLICATE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    api_token: str = Field(
        validation_alias=AliasChoices("REPLICATE_API_TOKEN", "REPLICATE_API_KEY"),
        repr=False,
    )
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: Optional[float] = Field(default=None)

    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    def __init__(self, **values):
        try:
            super().__init__(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid Replicate configuration: {exc}") from exc

    @field_validator("api_token")
    @classmethod
    def _check_token(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("API token must not be empty")
        if any(char.isspace() for char in value):
            raise ValueError("API token must not contain whitespace")
        return value

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return value.rstrip("/")
