"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from .core.constants import DEFAULT_BASE_URL, DEFAULT_CACHE_SIZE, DEFAULT_TIMEOUT
from .core.exceptions import ConfigurationError

# Settings field -> environment variable
ENV_VARS = {
    "api_key": "FILLOUT_SK",
    "host": "HOST",
    "port": "PORT",
    "base_url": "FILLOUT_API_URL",
    "cache_size": "RESPONSES_CACHE_SIZE",
    "timeout": "FILLOUT_TIMEOUT",
}


class Settings(BaseModel):
    """Service settings."""

    api_key: str = Field(..., min_length=1)
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=0, le=65535)
    base_url: str = DEFAULT_BASE_URL
    cache_size: int = Field(default=DEFAULT_CACHE_SIZE, ge=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Raises:
            ConfigurationError: If FILLOUT_SK is missing or a value is invalid
        """
        environ = os.environ if environ is None else environ
        if not environ.get(ENV_VARS["api_key"]):
            raise ConfigurationError(f"[ENV] Missing {ENV_VARS['api_key']}!")

        values = {
            field: environ[name] for field, name in ENV_VARS.items() if environ.get(name)
        }
        try:
            return cls.model_validate(values)
        except pydantic.ValidationError as e:
            bad = ", ".join(ENV_VARS[str(error["loc"][0])] for error in e.errors())
            raise ConfigurationError(f"[ENV] Invalid {bad}") from e
