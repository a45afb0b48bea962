"""Password hashing for fixture users (bcrypt)."""

import bcrypt

from booking_fixtures.core.config import settings


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password with bcrypt (PASSWORD_HASH_ROUNDS, default 12)."""
    salt = bcrypt.gensalt(rounds=rounds or settings.PASSWORD_HASH_ROUNDS)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Verify a plain-text password against its bcrypt hash."""
    if not password_hash:
        return False
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        password_hash.encode("utf-8"),
    )
