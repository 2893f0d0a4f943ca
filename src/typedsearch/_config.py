from os import environ as env
from typing import Optional

from pydantic import BaseModel, HttpUrl, field_validator, model_validator

from ._utils.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_COMPATIBILITY_VERSION,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_CA_CERTS,
    ENV_COMPATIBILITY_VERSION,
    ENV_MAX_RETRIES,
    ENV_PASSWORD,
    ENV_TIMEOUT,
    ENV_USERNAME,
)


class Config(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    compatibility_version: int = DEFAULT_COMPATIBILITY_VERSION
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    ca_certs: Optional[str] = None
    verify_certs: bool = True
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        url = HttpUrl(url=value)
        assert url.scheme in ("http", "https"), "Invalid URL"
        return value.rstrip("/")

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, value: int) -> int:
        assert value >= 0, "max_retries must not be negative"
        return value

    @model_validator(mode="after")
    def validate_basic_auth(self) -> "Config":
        if (self.username is None) != (self.password is None):
            raise ValueError("username and password must be provided together")
        return self

    def __repr__(self) -> str:
        """Keep credentials out of logs."""
        return (
            f"Config(base_url={self.base_url!r}, "
            f"api_key={'***' if self.api_key else None!r}, "
            f"username={self.username!r}, "
            f"compatibility_version={self.compatibility_version!r}, "
            f"timeout={self.timeout!r}, max_retries={self.max_retries!r})"
        )

    __str__ = __repr__

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Build a config from ``TYPEDSEARCH_*`` variables.

        Explicit keyword arguments win over the environment; ``None`` means
        "not given".
        """
        values = {
            "base_url": env.get(ENV_BASE_URL),
            "api_key": env.get(ENV_API_KEY),
            "username": env.get(ENV_USERNAME),
            "password": env.get(ENV_PASSWORD),
            "compatibility_version": env.get(ENV_COMPATIBILITY_VERSION),
            "timeout": env.get(ENV_TIMEOUT),
            "max_retries": env.get(ENV_MAX_RETRIES),
            "ca_certs": env.get(ENV_CA_CERTS),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**{k: v for k, v in values.items() if v is not None})
