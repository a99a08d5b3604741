"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_token_service`` and ``get_current_user_id``
dependencies that are used across all protected routes.  The database and
the token service are built by ``main.create_app`` and live on
``app.state``.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import TokenService
from config.settings import Settings
from utils.errors import AuthError

logger = logging.getLogger(__name__)


async def db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers, rolling back on error."""
    async with request.app.state.database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def bearer_token(authorization: Optional[str]) -> str:
    """
    Strip the ``Bearer`` scheme from an Authorization header value.

    The scheme is matched case-insensitively; anything else, including a
    bare token, is rejected.
    """
    if not authorization:
        raise AuthError("missing")
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise AuthError("missing")
    return token


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """
    Extract and verify the Bearer token from the Authorization header.
    Returns the authenticated user id.
    """
    try:
        claims = tokens.validate(bearer_token(authorization))
    except AuthError as exc:
        logger.debug("Rejected credentials: %s", exc.kind)
        raise
    return claims.user_id
