"""
Database helpers for users and chirps.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Chirp, User

logger = logging.getLogger(__name__)


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


async def create_user(
    session: AsyncSession,
    email: str,
    hashed_password: str,
) -> User:
    """Insert a new user and return it with server defaults populated."""
    user = User(id=uuid.uuid4(), email=email, hashed_password=hashed_password)
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def delete_all_users(session: AsyncSession) -> int:
    """Delete every user (chirps go with them via ON DELETE CASCADE)."""
    result = await session.execute(delete(User))
    await session.flush()
    deleted = result.rowcount or 0
    logger.info("Deleted %d users", deleted)
    return deleted


async def create_chirp(
    session: AsyncSession,
    body: str,
    user_id: str | uuid.UUID,
) -> Chirp:
    chirp = Chirp(id=uuid.uuid4(), body=body, user_id=_to_uuid(user_id))
    session.add(chirp)
    await session.flush()
    await session.refresh(chirp)
    return chirp


async def get_chirps(session: AsyncSession) -> List[Chirp]:
    """All chirps, oldest first."""
    result = await session.execute(select(Chirp).order_by(Chirp.created_at.asc()))
    return list(result.scalars().all())


async def get_chirp(session: AsyncSession, chirp_id: str | uuid.UUID) -> Optional[Chirp]:
    result = await session.execute(select(Chirp).where(Chirp.id == _to_uuid(chirp_id)))
    return result.scalar_one_or_none()
