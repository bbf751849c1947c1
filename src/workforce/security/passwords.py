"""
Password hashing helpers backed by passlib's bcrypt scheme.
"""

from functools import lru_cache

from passlib.context import CryptContext

from ..config import settings


@lru_cache(maxsize=4)
def get_password_context(rounds: int) -> CryptContext:
    """Return a CryptContext using the given bcrypt work factor."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    return get_password_context(settings.password_hash_rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Returns False (instead of raising) when the hash is empty or not a
    recognised bcrypt digest.
    """
    if not hashed_password:
        return False
    try:
        return get_password_context(settings.password_hash_rounds).verify(
            plain_password, hashed_password
        )
    except (ValueError, TypeError):
        return False
