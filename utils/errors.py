"""
Error taxonomy shared by the hasher, token service, validators and the
persistence helpers.

Every error carries the client-facing ``message`` and the HTTP status it
maps to; ``api.middleware`` renders them as ``{"message": ...}``.
"""

from __future__ import annotations


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Client input missing or malformed."""

    status_code = 400


class AuthError(AppError):
    """
    Missing, malformed, forged or expired credentials.

    ``kind`` is kept for logging only, clients always see
    ``unauthenticated``.
    """

    status_code = 401

    def __init__(self, kind: str, message: str = "unauthenticated") -> None:
        super().__init__(message)
        self.kind = kind


class NotFoundError(AppError):
    status_code = 404


class PersistenceError(AppError):
    """Store unavailable or a constraint was violated."""

    status_code = 500


class HashError(AppError):
    status_code = 500


class SigningError(AppError):
    status_code = 500
