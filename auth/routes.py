"""
Auth API routes — register, login, current user.

Route prefix: /user
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id, get_settings, get_token_service
from auth.jwt import TokenService
from auth.password import hash_password, verify_password
from config.settings import Settings
from database.helpers import create_user, get_user_by_email, get_user_by_id
from utils.errors import NotFoundError, ValidationError
from utils.validators import validate_registration

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class UserOut(BaseModel):
    """Public view of a user; the password hash is never serialized."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LoginResponse(BaseModel):
    message: str
    token: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/register", response_model=UserOut)
async def register(
    payload: Dict[str, Any] = Body(...),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> UserOut:
    """Register a new user."""
    data = validate_registration(payload)
    password_hash = await run_in_threadpool(
        hash_password, data.password, settings.bcrypt_rounds
    )
    user = await create_user(session, data.name, data.email, password_hash)
    logger.info("Registered user %s (%s)", user.id, user.email)
    return UserOut.model_validate(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: Dict[str, Any] = Body(...),
    session: AsyncSession = Depends(db_session),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, str]:
    """Login with email + password."""
    email = payload.get("email") or ""
    password = payload.get("password") or ""
    if not isinstance(email, str) or not isinstance(password, str):
        raise ValidationError("Invalid request body")

    user = await get_user_by_email(session, email)
    if user is None:
        raise NotFoundError("User not found")

    if not await run_in_threadpool(verify_password, password, user.password_hash):
        logger.info("Login rejected for user %s: incorrect password", user.id)
        raise ValidationError("incorrect password")

    token = tokens.issue(user.id)
    logger.info("Login: %s (%s)", user.email, user.id)
    return {"message": "success", "token": token}


@router.get("", response_model=UserOut)
async def current_user(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> UserOut:
    """Return the user the Bearer token was issued to."""
    user = await get_user_by_id(session, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserOut.model_validate(user)
