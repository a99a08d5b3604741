"""
JWT creation and verification.

Tokens are standard HS256 JWTs carrying two claims: ``iss`` (the user id
as a string) and ``exp``.  The secret is handed in once at startup and
never rotated.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import jwt

from utils.errors import AuthError, SigningError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


@dataclass(frozen=True)
class Claims:
    issuer: str
    expires_at: int

    @property
    def user_id(self) -> int:
        return int(self.issuer)


class TokenService:
    """Issue and validate signed, time-limited identity tokens."""

    def __init__(self, secret: str, expiry_seconds: int = 86400) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._expiry_seconds = expiry_seconds

    def issue(self, user_id: int, now: float | None = None) -> str:
        """Create a signed token for ``user_id`` expiring ``expiry_seconds`` from now."""
        issued_at = int(time.time() if now is None else now)
        payload = {
            "iss": str(user_id),
            "exp": issued_at + self._expiry_seconds,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise SigningError("could not login") from exc

    def validate(self, token: str) -> Claims:
        """
        Verify signature and expiry and return the claims.

        Raises ``AuthError`` with ``kind`` one of ``malformed``,
        ``bad-signature`` or ``expired``.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["iss", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthError("expired") from exc
        except jwt.InvalidSignatureError as exc:
            raise AuthError("bad-signature") from exc
        except jwt.PyJWTError as exc:
            raise AuthError("malformed") from exc

        issuer = payload["iss"]
        if not isinstance(issuer, str) or not issuer.isdigit():
            raise AuthError("malformed")
        return Claims(issuer=issuer, expires_at=int(payload["exp"]))
