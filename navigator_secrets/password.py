"""
Password commitment.

A fast, deterministic 64-bit digest of the password is stored so that the
retrieval side can gate access by equality. This is a casual barrier only:
it is NOT a slow, salted password hash and does not resist offline brute
force if the commitment leaks.
"""
import hashlib
from typing import Optional

COMMITMENT_SIZE = 8  # 64-bit


def hash_password(pwd: str) -> int:
    """Return the signed 64-bit commitment of a password."""
    digest = hashlib.blake2b(
        pwd.encode("utf-8"), digest_size=COMMITMENT_SIZE
    ).digest()
    return int.from_bytes(digest, "big", signed=True)


def commit_password(pwd: Optional[str]) -> Optional[int]:
    if pwd is None:
        return None
    return hash_password(pwd)


def verify_password(commitment: Optional[int], pwd: Optional[str]) -> bool:
    """Check a supplied password against a stored commitment.

    A secret stored without a commitment requires no password.
    """
    if commitment is None:
        return True
    if pwd is None:
        return False
    return hash_password(pwd) == commitment
