"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from sleeppdf.crud.models import SubscriptionTier, User


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="user")
def user_fixture(session):
    """A free-tier User persisted to the session."""
    u = User(email="parent@example.com")
    session.add(u)
    session.flush()
    return u


@pytest.fixture(name="basic_user")
def basic_user_fixture(session):
    """A basic-tier User with two export credits."""
    u = User(email="basic@example.com", subscription_tier=SubscriptionTier.basic, export_credits=2)
    session.add(u)
    session.flush()
    return u
