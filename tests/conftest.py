"""Test configuration and fixtures."""

from __future__ import annotations

from dataclasses import replace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from core import db
from core.state import AppState, Repositories
from main import create_app
from tests.fixtures.dummies import DummyPool, InMemoryUserRepo
from users.service import UserService


def create_app_for_test(state: AppState, pool: DummyPool):
    """Build an app whose connection dependency checks out from `pool`."""
    app = create_app(state)

    async def _get_connection():
        async with pool.acquire() as conn:
            yield conn

    app.dependency_overrides[db.get_connection] = _get_connection
    return app


@pytest.fixture
def dummy_pool() -> DummyPool:
    return DummyPool()


@pytest.fixture
def user_repo() -> InMemoryUserRepo:
    return InMemoryUserRepo()


@pytest.fixture
def app_state(user_repo: InMemoryUserRepo) -> AppState:
    """Real use-cases over an in-memory repository."""
    return AppState(repos=Repositories(user=user_repo))


@pytest.fixture(name="client")
def client_fixture(app_state: AppState, dummy_pool: DummyPool) -> TestClient:
    return TestClient(create_app_for_test(app_state, dummy_pool))


@pytest.fixture
def mock_user_use_case() -> AsyncMock:
    return AsyncMock(spec=UserService)


@pytest.fixture
def mocked_client(app_state: AppState, dummy_pool: DummyPool, mock_user_use_case: AsyncMock) -> TestClient:
    """Client whose user use-case is replaced by `mock_user_use_case`."""
    state = replace(app_state, use_cases=replace(app_state.use_cases, user=mock_user_use_case))
    return TestClient(create_app_for_test(state, dummy_pool))
