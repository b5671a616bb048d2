"""
Password Hashing

bcrypt helpers backing User.set_password / User.authenticate.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 8


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a plain-text password

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor

    Returns:
        str: bcrypt hash (includes salt and cost)
    """
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str | None) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError as exc:
        # Stored value is not a bcrypt hash
        logger.warning("Password verification failed: %s", exc)
        return False
