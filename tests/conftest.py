"""Shared fixtures: a throwaway SQLite database per test."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

import meetup.database as database
from meetup.main import app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "meetup.db"


@pytest.fixture
def client(db_path):
    previous_url = database.CURRENT_DATABASE_URL
    database.configure_engine(f"sqlite+aiosqlite:///{db_path.as_posix()}")
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        asyncio.run(database.engine.dispose())
        database.configure_engine(previous_url)


@pytest.fixture
def sync_engine(db_path, client):
    """Plain SQLAlchemy engine on the same file, for asserting on stored rows."""
    engine = create_engine(f"sqlite:///{db_path.as_posix()}")
    yield engine
    engine.dispose()
