"""Pytest fixtures and configuration"""

import itertools
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from friendsplit.api.deps import get_session
from friendsplit.config import Settings
from friendsplit.data.seed import initial_friends
from friendsplit.main import app
from friendsplit.repositories.friend_repository import FriendRepository
from friendsplit.services.session_service import SplitterSession, create_session


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore any local .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def id_generator() -> Callable[[], str]:
    """Deterministic friend ids: new-1, new-2, ..."""
    counter = itertools.count(1)
    return lambda: f"new-{next(counter)}"


@pytest.fixture
def repository() -> FriendRepository:
    """Registry holding the three seed friends"""
    return FriendRepository(initial_friends())


@pytest.fixture
def session(settings: Settings, id_generator) -> SplitterSession:
    """Fresh seeded session for each test"""
    return create_session(settings, id_generator=id_generator)


@pytest_asyncio.fixture
async def client(session: SplitterSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with session override"""

    app.dependency_overrides[get_session] = lambda: session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
