"""
Secrets Crypto Core — Key generation and authenticated encryption.

Every secret is sealed under its own freshly generated key:
    key = 32 random alphanumeric characters (used directly as key bytes)
    blob = [nonce 12B][encrypted_payload + tag 16B]

The key is handed back to the caller and never stored with the record,
so the ciphertext alone is useless to whoever persists it.

Keys and nonces are both drawn from a ``RandomSource``; the OS CSPRNG
unless the caller injects another one.

Security Note:
    Never log plaintext, ciphertext or key values.
    Nonces are random 96-bit; every key seals exactly one payload.
"""
import string
import logging
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from .exceptions import CryptoError
from .randomness import RandomSource, default_random

logger = logging.getLogger("navigator.secrets")

NONCE_SIZE = 12  # 96-bit nonce
TAG_SIZE = 16
KEY_LENGTH = 32  # 256-bit key
SEAL_OVERHEAD = NONCE_SIZE + TAG_SIZE

KEY_ALPHABET = string.ascii_letters + string.digits

CIPHER_BACKENDS = {
    "chacha20": ChaCha20Poly1305,
    "aesgcm": AESGCM,
}


def get_cipher_cls(backend: str) -> type:
    """Return the AEAD cipher class for a backend name."""
    try:
        return CIPHER_BACKENDS[backend.lower()]
    except KeyError:
        raise ValueError(f"Unsupported cipher backend: {backend}") from None


def _default_cipher_cls() -> type:
    """Cipher of the process configuration, resolved on first use."""
    from .conf import get_config
    return get_config().cipher_cls


# ---------------------------------------------------------------------------
# Key generation
# ---------------------------------------------------------------------------

def generate_key(
    random_source: Optional[RandomSource] = None,
    length: int = KEY_LENGTH,
) -> str:
    """Generate a random alphanumeric key string.

    Args:
        random_source: Source of randomness (defaults to the OS CSPRNG).
        length: Number of characters to draw.

    Returns:
        Key string of ``length`` characters from [A-Za-z0-9].
    """
    rnd = random_source or default_random
    return "".join(rnd.choice(KEY_ALPHABET) for _ in range(length))


def key_from_string(key: str) -> bytes:
    """Turn a key string into raw AEAD key material.

    Raises:
        CryptoError: If the encoded key is not exactly KEY_LENGTH bytes.
    """
    key_bytes = key.encode("utf-8")
    if len(key_bytes) != KEY_LENGTH:
        raise CryptoError(
            f"Secret key must be exactly {KEY_LENGTH} bytes, "
            f"got {len(key_bytes)}"
        )
    return key_bytes


# ---------------------------------------------------------------------------
# Sealing
# ---------------------------------------------------------------------------

def seal(
    key: bytes,
    plaintext: bytes,
    cipher_cls: Optional[type] = None,
    random_source: Optional[RandomSource] = None,
) -> bytes:
    """Encrypt and authenticate plaintext under key.

    Format: [nonce 12B][encrypted_payload + tag 16B]

    Args:
        key: Raw 32-byte key.
        plaintext: Data to seal, any length the cipher accepts.
        cipher_cls: AEAD class (ChaCha20Poly1305 or AESGCM); defaults to
            the configured cipher.
        random_source: Source of the nonce (defaults to the OS CSPRNG).

    Returns:
        Sealed blob bytes.

    Raises:
        CryptoError: If the key is rejected or encryption fails.
    """
    cipher_cls = cipher_cls or _default_cipher_cls()
    rnd = random_source or default_random
    try:
        cipher = cipher_cls(key)
        nonce = rnd.token_bytes(NONCE_SIZE)
        ct = cipher.encrypt(nonce, plaintext, None)
    except (ValueError, TypeError, OverflowError) as err:
        raise CryptoError(f"Unable to seal secret: {err}") from err
    return nonce + ct


def open_sealed(key: bytes, blob: bytes, cipher_cls: Optional[type] = None) -> bytes:
    """Decrypt and verify a blob produced by ``seal``.

    Raises:
        CryptoError: If the blob is truncated, tampered or the key is wrong.
    """
    if len(blob) < SEAL_OVERHEAD:
        raise CryptoError(
            f"Sealed blob too short: {len(blob)} bytes "
            f"(minimum {SEAL_OVERHEAD})"
        )
    cipher_cls = cipher_cls or _default_cipher_cls()
    nonce = blob[:NONCE_SIZE]
    ct = blob[NONCE_SIZE:]
    try:
        cipher = cipher_cls(key)
        return cipher.decrypt(nonce, ct, None)
    except InvalidTag as err:
        raise CryptoError("Secret authentication failed") from err
    except (ValueError, TypeError) as err:
        raise CryptoError(f"Unable to open secret: {err}") from err
