"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import bcrypt

from utils.errors import HashError

DEFAULT_ROUNDS = 14

# bcrypt only looks at the first 72 bytes; newer releases refuse longer input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with bcrypt (auto-salted, work factor ``rounds``)."""
    try:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()
    except (ValueError, TypeError) as exc:
        raise HashError("could not hash password") from exc


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False
