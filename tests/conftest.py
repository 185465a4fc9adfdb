"""Pytest fixtures for the parcel store tests."""

import itertools

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from parcel_tracker.db import Base, init_db
from parcel_tracker.schemas import Parcel, STATUS_REGISTERED
from parcel_tracker.store import ParcelStore


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite database with the parcel table created."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine):
    """Caller-owned session; tests open and close it, never the store."""
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture(scope="function")
def store(db):
    return ParcelStore(db)


@pytest.fixture(scope="function")
def next_client():
    """Hands out distinct client numbers in a deterministic order."""
    counter = itertools.count(5000)
    return lambda: next(counter)


@pytest.fixture
def make_parcel():
    def _make(client=1000, status=STATUS_REGISTERED, address="test",
              created_at="2024-01-01T00:00:00Z"):
        return Parcel(client=client, status=status, address=address, created_at=created_at)
    return _make
