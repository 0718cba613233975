"""
Auth API routes — register, login.

Route prefix: /api
"""

from __future__ import annotations

import logging
import secrets
import uuid
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session
from auth.errors import HashingError
from auth.jwt import make_jwt
from auth.password import check_password_hash, hash_password
from config.settings import config
from database.helpers import create_user, get_user_by_email
from utils.validators import is_valid_email_format

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class RegisterRequest(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class LoginRequest(BaseModel):
    email: str
    password: str
    expires_in_seconds: Optional[int] = None


class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    created_at: datetime
    updated_at: datetime


class LoginResponse(UserResponse):
    token: str


def _user_to_dict(user) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password(secrets.token_urlsafe(16))


def token_lifetime(requested_seconds: Optional[int]) -> timedelta:
    """Client-requested lifetime, capped at the configured maximum."""
    limit = config.jwt_expiry_seconds
    if requested_seconds is None or requested_seconds <= 0 or requested_seconds > limit:
        return timedelta(seconds=limit)
    return timedelta(seconds=requested_seconds)


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user."""
    if not is_valid_email_format(req.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid or missing email address",
        )

    if await get_user_by_email(session, req.email) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    try:
        hashed = await run_in_threadpool(hash_password, req.password)
    except HashingError as exc:
        logger.error("Password hashing failed during registration: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create user",
        )

    try:
        user = await create_user(session, req.email, hashed)
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )
    logger.info("Registered user %s", user.id)
    return _user_to_dict(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password and receive a signed token."""
    user = await get_user_by_email(session, req.email)
    if user is None:
        # unknown emails pay the same argon2 cost as known ones
        await run_in_threadpool(check_password_hash, req.password, _dummy_hash())
        logger.warning("Login failed: unknown email")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )

    try:
        matches = await run_in_threadpool(check_password_hash, req.password, user.hashed_password)
    except HashingError as exc:
        logger.error("Stored hash for user %s could not be checked: %s", user.id, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong",
        )

    if not matches:
        logger.warning("Login failed: wrong password for user %s", user.id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )

    token = make_jwt(user.id, config.jwt_secret, token_lifetime(req.expires_in_seconds))
    logger.info("Login: %s", user.id)

    return {**_user_to_dict(user), "token": token}
