"""
Secret records.

``Secret`` is the persisted record: descriptive metadata, the expiration
policy with its consumption counter, and the optional password commitment.
It never holds the encryption key or the ciphertext; those travel together
with the record only inside ``SecretPlusData`` and are meant to be stored
or delivered separately by the caller.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UNLIMITED_READS = -1


class Meta(BaseModel):
    """Non-sensitive metadata about a sealed payload."""
    model_config = ConfigDict(frozen=True)

    content_type: str = Field(..., min_length=1)
    user_agent: Optional[str] = None
    x_forwarded_for: Optional[str] = None
    # size of the ciphertext, not of the plaintext
    bytes: int = Field(..., ge=0)


class LifecycleMax(BaseModel):
    model_config = ConfigDict(frozen=True)

    reads: int
    seconds: int
    expires: datetime


class LifecycleCurrent(BaseModel):
    model_config = ConfigDict(frozen=True)

    reads: int = 0


class Lifecycle(BaseModel):
    """Expiration limits and consumption counters."""
    model_config = ConfigDict(frozen=True)

    max: LifecycleMax
    current: LifecycleCurrent = Field(default_factory=LifecycleCurrent)

    @property
    def unlimited_reads(self) -> bool:
        return self.max.reads == UNLIMITED_READS


class Facts(BaseModel):
    model_config = ConfigDict(frozen=True)

    pwd: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)


class Secret(BaseModel):
    """A sealed, single-use secret record."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    active: bool = True
    meta: Meta
    lifecycle: Lifecycle
    facts: Facts = Field(default_factory=Facts)

    @classmethod
    def create(cls, value: bytes, *args, **kwargs) -> "SecretPlusData":
        """Seal value into a new secret. See ``create_secret``."""
        from .secret import create_secret
        return create_secret(value, *args, **kwargs)

    def to_json(self) -> bytes:
        """Serialize the record for storage (datetimes as RFC 3339)."""
        return orjson.dumps(self.model_dump())

    @classmethod
    def from_json(cls, data: bytes) -> "Secret":
        return cls.model_validate(orjson.loads(data))


@dataclass(frozen=True)
class SecretPlusData:
    """Result of sealing: the record, its key and the ciphertext.

    Never persisted as-is. The key is redacted from the repr.
    """
    secret: Secret
    key: str = field(repr=False)
    value: bytes = field(repr=False)

    @property
    def id(self) -> str:
        return self.secret.id
