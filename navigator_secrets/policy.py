"""
Expiration policy normalization.

Reconciles the caller's optional read-count and time-to-live limits into
the canonical policy stored on every secret:

- reads given: kept as-is (``-1`` means unlimited).
- neither given: burn after one read.
- only seconds given: unlimited reads until the TTL runs out.
- seconds above the maximum are clamped, never rejected.

Zero or negative values are not rejected; callers are trusted to pass
sane limits.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from .conf import DEFAULT_EXPIRE_SECONDS, MAX_EXPIRE_SECONDS
from .models import UNLIMITED_READS, LifecycleMax

logger = logging.getLogger("navigator.secrets")


def normalize_reads(
    expire_reads: Optional[int],
    expire_seconds: Optional[int],
) -> int:
    if expire_reads is not None:
        return expire_reads
    if expire_seconds is None:
        return 1
    return UNLIMITED_READS


def normalize_seconds(
    expire_seconds: Optional[int],
    max_seconds: int = MAX_EXPIRE_SECONDS,
    default_seconds: int = DEFAULT_EXPIRE_SECONDS,
) -> int:
    if expire_seconds is None:
        logger.debug("No expiration set, defaulting to %d seconds", default_seconds)
        return default_seconds
    if expire_seconds > max_seconds:
        logger.warning(
            "Incorrect expire_seconds requested, defaulting to %d", max_seconds
        )
        return max_seconds
    return expire_seconds


def normalize_expiration(
    expire_reads: Optional[int] = None,
    expire_seconds: Optional[int] = None,
    now: Optional[datetime] = None,
    max_seconds: int = MAX_EXPIRE_SECONDS,
    default_seconds: int = DEFAULT_EXPIRE_SECONDS,
) -> LifecycleMax:
    """Build the canonical expiration limits for a new secret.

    Args:
        expire_reads: Requested read limit, or None.
        expire_seconds: Requested time-to-live, or None.
        now: Creation time; naive datetimes are taken as UTC.
        max_seconds: Upper bound for the time-to-live.
        default_seconds: Time-to-live used when none was requested.

    Returns:
        LifecycleMax with reads, seconds and absolute expiry.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    reads = normalize_reads(expire_reads, expire_seconds)
    seconds = normalize_seconds(expire_seconds, max_seconds, default_seconds)
    return LifecycleMax(
        reads=reads,
        seconds=seconds,
        expires=now + timedelta(seconds=seconds),
    )
