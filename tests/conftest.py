import random
from datetime import datetime, timezone

import pytest

from navigator_secrets.conf import SecretsConfig, get_config
from navigator_secrets.randomness import RandomSource


class SeededRandomSource(RandomSource):
    """Deterministic RandomSource for reproducible ids and keys."""

    def __init__(self, seed: int = 0):
        self._rnd = random.Random(seed)

    def token_bytes(self, nbytes: int) -> bytes:
        return self._rnd.randbytes(nbytes)

    def choice(self, seq):
        return self._rnd.choice(seq)


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Never leak an env-loaded config between tests."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def seeded():
    """A deterministic random source."""
    return SeededRandomSource(seed=42)


@pytest.fixture
def config():
    """Default configuration, independent of env."""
    return SecretsConfig()


@pytest.fixture
def now():
    """Fixed UTC creation time."""
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_random():
    """Factory for seeded random sources."""
    return SeededRandomSource
