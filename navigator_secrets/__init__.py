"""Navigator Secrets — single-use, encrypted, self-expiring secrets.

Security Note (Threat Model):
    The key returned by ``create_secret`` is the only way to open the
    ciphertext. Callers must deliver it out-of-band (e.g. in a URL fragment)
    and never persist it next to the record or the ciphertext.
"""

from .version import __version__
from .conf import SecretsConfig, get_config
from .crypto import generate_key, open_sealed, seal
from .exceptions import CryptoError, SecretsError
from .headers import headers_from_request
from .models import (
    Facts,
    Lifecycle,
    LifecycleCurrent,
    LifecycleMax,
    Meta,
    Secret,
    SecretPlusData,
)
from .password import hash_password, verify_password
from .policy import normalize_expiration
from .randomness import RandomSource, SystemRandomSource
from .secret import create_secret

__all__ = [
    "__version__",
    "create_secret",
    "Secret",
    "SecretPlusData",
    "Meta",
    "Lifecycle",
    "LifecycleMax",
    "LifecycleCurrent",
    "Facts",
    "SecretsConfig",
    "get_config",
    "RandomSource",
    "SystemRandomSource",
    "generate_key",
    "seal",
    "open_sealed",
    "hash_password",
    "verify_password",
    "normalize_expiration",
    "headers_from_request",
    "SecretsError",
    "CryptoError",
]
