"""
Pytest configuration.
Provides a fresh SQLite store, repository, service and HTTP client per test.
"""

import asyncio
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from db.connection import Store
from db.init_db import create_tables
from main import create_app
from repositories.user_repo import UserRepository
from services.user_service import UserService


def run(coro):
    """Drive a coroutine to completion from a synchronous test."""
    return asyncio.run(coro)


# ==================== Database fixtures ====================

@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "test.sqlite")


@pytest.fixture
def store(db_path):
    """Connected store with the users table in place."""
    s = Store(db_path)
    run(s.connect())
    run(create_tables(s))
    yield s
    run(s.close())


@pytest.fixture
def user_repository(store) -> UserRepository:
    return UserRepository(store)


@pytest.fixture
def user_service(user_repository) -> UserService:
    return UserService(user_repository)


# ==================== HTTP fixtures ====================

@pytest.fixture
def client(db_path):
    """TestClient running the full app lifespan against a temp database."""
    with TestClient(create_app(db_path)) as c:
        yield c
