"""
Randomness providers used to mint secret identifiers and keys.

Creation never reaches for a hidden global generator: callers may pass any
``RandomSource`` (a seeded one in tests, a hardware-backed one in production).
The default, ``SystemRandomSource``, reads from the OS CSPRNG through the
``secrets`` module and is safe to share between threads.
"""
import uuid
import secrets
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class RandomSource(ABC):
    """Capability interface for secure random material."""

    @abstractmethod
    def token_bytes(self, nbytes: int) -> bytes:
        """Return ``nbytes`` uniformly random bytes."""

    @abstractmethod
    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a uniformly chosen element of a non-empty sequence."""

    def uuid4(self) -> uuid.UUID:
        """Build a version 4 UUID from 16 random bytes."""
        return uuid.UUID(bytes=self.token_bytes(16), version=4)


class SystemRandomSource(RandomSource):
    """RandomSource backed by the operating system CSPRNG."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)

    def choice(self, seq: Sequence[Any]) -> Any:
        return secrets.choice(seq)


default_random = SystemRandomSource()
