"""
Tests for the database helpers against a mocked AsyncSession.
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from database.helpers import (
    create_chirp,
    create_user,
    delete_all_users,
    get_chirp,
    get_chirps,
    get_user_by_email,
)
from database.models import Chirp, User


def _session(result=None) -> MagicMock:
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    return session


class TestUserHelpers:
    @pytest.mark.asyncio
    async def test_create_user(self):
        session = _session()
        user = await create_user(session, "saul@bettercall.com", "$argon2id$stub")

        assert isinstance(user, User)
        assert isinstance(user.id, uuid.UUID)
        assert user.email == "saul@bettercall.com"
        assert user.hashed_password == "$argon2id$stub"
        session.add.assert_called_once_with(user)
        session.flush.assert_awaited_once()
        session.refresh.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_get_user_by_email_missing(self):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        session = _session(result)

        assert await get_user_by_email(session, "nobody@example.com") is None
        session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_all_users_returns_count(self):
        result = MagicMock()
        result.rowcount = 3
        session = _session(result)

        assert await delete_all_users(session) == 3


class TestChirpHelpers:
    @pytest.mark.asyncio
    async def test_create_chirp_accepts_string_user_id(self):
        session = _session()
        user_id = uuid.uuid4()
        chirp = await create_chirp(session, "hello", str(user_id))

        assert isinstance(chirp, Chirp)
        assert chirp.user_id == user_id
        assert chirp.body == "hello"

    @pytest.mark.asyncio
    async def test_get_chirps_returns_list(self):
        rows = [MagicMock(), MagicMock()]
        result = MagicMock()
        result.scalars.return_value.all.return_value = rows
        session = _session(result)

        assert await get_chirps(session) == rows

    @pytest.mark.asyncio
    async def test_get_chirp(self):
        chirp = MagicMock()
        result = MagicMock()
        result.scalar_one_or_none.return_value = chirp
        session = _session(result)

        assert await get_chirp(session, str(uuid.uuid4())) is chirp
