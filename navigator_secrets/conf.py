"""
Secrets Configuration — Validated settings for secret creation.

Reads optional overrides from environment variables:
    NAVIGATOR_SECRETS_CIPHER = chacha20 | aesgcm
    NAVIGATOR_SECRETS_MAX_SECONDS = <int, at most 2592000>
    NAVIGATOR_SECRETS_DEFAULT_SECONDS = <int>
"""
import os
import logging
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .crypto import CIPHER_BACKENDS, KEY_LENGTH, get_cipher_cls

logger = logging.getLogger("navigator.secrets")

MAX_EXPIRE_SECONDS = 2592000  # 30 days
DEFAULT_EXPIRE_SECONDS = 3600  # one hour


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to default."""
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    return int(raw)


class SecretsConfig(BaseModel):
    """Validated secret creation configuration."""

    cipher_backend: str = Field(default="chacha20")
    key_length: int = Field(default=KEY_LENGTH)
    max_seconds: int = Field(default=MAX_EXPIRE_SECONDS, ge=1, le=MAX_EXPIRE_SECONDS)
    default_seconds: int = Field(default=DEFAULT_EXPIRE_SECONDS, ge=1)

    model_config = {"frozen": True}

    @field_validator("cipher_backend")
    @classmethod
    def validate_cipher(cls, v: str) -> str:
        """Validate cipher backend is supported."""
        v = v.lower()
        if v not in CIPHER_BACKENDS:
            raise ValueError(f"Unsupported cipher backend: {v}")
        return v

    @field_validator("key_length")
    @classmethod
    def validate_key_length(cls, v: int) -> int:
        """Both AEAD backends take 256-bit keys only."""
        if v != KEY_LENGTH:
            raise ValueError(f"key_length must be {KEY_LENGTH}, got {v}")
        return v

    @model_validator(mode="after")
    def validate_default_within_max(self) -> "SecretsConfig":
        """Ensure the default TTL does not exceed the maximum TTL."""
        if self.default_seconds > self.max_seconds:
            raise ValueError(
                f"default_seconds {self.default_seconds} exceeds "
                f"max_seconds {self.max_seconds}"
            )
        return self

    @property
    def cipher_cls(self) -> type:
        return get_cipher_cls(self.cipher_backend)

    @classmethod
    def from_env(cls) -> "SecretsConfig":
        """Create SecretsConfig by loading values from environment.

        Returns:
            Populated SecretsConfig instance.
        """
        config = cls(
            cipher_backend=os.environ.get("NAVIGATOR_SECRETS_CIPHER", "chacha20"),
            max_seconds=_env_int(
                "NAVIGATOR_SECRETS_MAX_SECONDS", MAX_EXPIRE_SECONDS
            ),
            default_seconds=_env_int(
                "NAVIGATOR_SECRETS_DEFAULT_SECONDS", DEFAULT_EXPIRE_SECONDS
            ),
        )
        logger.debug(
            "Loaded secrets config: cipher=%s max_seconds=%d default_seconds=%d",
            config.cipher_backend, config.max_seconds, config.default_seconds,
        )
        return config


@lru_cache(maxsize=1)
def get_config() -> SecretsConfig:
    """Return the process-wide configuration, loaded once from env."""
    return SecretsConfig.from_env()


def resolve_config(config: Optional[SecretsConfig] = None) -> SecretsConfig:
    return config if config is not None else get_config()
