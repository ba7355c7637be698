"""
Secret creation — seal a payload into a new single-use secret.

``create_secret`` runs, in order and without branching back:
identity, key generation, content classification, sealing, expiration
normalization, password commitment and provenance capture. Any failure
aborts the whole call; a partially built secret is never returned.

Security Note:
    Never log plaintext, ciphertext, key or password values. Only ids,
    sizes, content types and policy decisions are logged.
"""
import logging
from datetime import datetime
from typing import Optional

from .conf import SecretsConfig, resolve_config
from .content import classify_content
from .crypto import generate_key, key_from_string, seal
from .exceptions import CryptoError
from .headers import Headers, as_header_map, capture_provenance
from .models import Facts, Lifecycle, Meta, Secret, SecretPlusData
from .password import commit_password
from .policy import normalize_expiration
from .randomness import RandomSource, default_random

logger = logging.getLogger("navigator.secrets")


def create_secret(
    value: bytes,
    expire_reads: Optional[int] = None,
    expire_seconds: Optional[int] = None,
    pwd: Optional[str] = None,
    headers: Optional[Headers] = None,
    *,
    random_source: Optional[RandomSource] = None,
    config: Optional[SecretsConfig] = None,
    now: Optional[datetime] = None,
) -> SecretPlusData:
    """Encrypt value under a fresh key and describe it as a new Secret.

    Args:
        value: Raw payload bytes.
        expire_reads: Read limit; ``-1`` for unlimited reads.
        expire_seconds: Time-to-live in seconds, clamped to the maximum.
        pwd: Optional password gating later retrieval.
        headers: Request headers (Content-Type, User-Agent, X-Forwarded-For).
        random_source: Source for the id and key (defaults to the OS CSPRNG).
        config: Settings; defaults to the process configuration.
        now: Creation time, defaults to the current UTC time.

    Returns:
        SecretPlusData with the record, the key string and the ciphertext.

    Raises:
        TypeError: If value is not a bytes-like object.
        CryptoError: If the key is invalid or sealing fails.
    """
    if isinstance(value, str) or not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"Secret value must be bytes-like, got {type(value).__name__}"
        )
    value = bytes(value)
    cfg = resolve_config(config)
    rnd = random_source or default_random
    hdrs = as_header_map(headers)

    secret_id = str(rnd.uuid4())
    logger.debug("Sealing up data as %s", secret_id)

    key = generate_key(rnd, cfg.key_length)
    content_type = classify_content(value, hdrs)

    try:
        ciphertext = seal(key_from_string(key), value, cfg.cipher_cls, rnd)
    except CryptoError as err:
        logger.error("Error encrypting secret %s: %s", secret_id, err)
        raise

    limits = normalize_expiration(
        expire_reads,
        expire_seconds,
        now=now,
        max_seconds=cfg.max_seconds,
        default_seconds=cfg.default_seconds,
    )

    secret = Secret(
        id=secret_id,
        active=True,
        meta=Meta(
            content_type=content_type,
            bytes=len(ciphertext),
            **capture_provenance(hdrs),
        ),
        lifecycle=Lifecycle(max=limits),
        facts=Facts(pwd=commit_password(pwd)),
    )
    logger.debug(
        "Sealed secret %s: %d bytes, reads=%d, seconds=%d",
        secret_id, len(ciphertext), limits.reads, limits.seconds,
    )
    return SecretPlusData(secret=secret, key=key, value=ciphertext)
