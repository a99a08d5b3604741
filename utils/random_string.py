"""
Random alphanumeric strings (used for the fallback signing secret).
"""

from __future__ import annotations

import secrets
import string

_CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits


def generate_random_string(length: int) -> str:
    """Return ``length`` characters drawn from ``[a-zA-Z0-9]``."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return "".join(secrets.choice(_CHARSET) for _ in range(length))
