"""Shared fixtures for integration tests"""

import pytest
from sqlmodel import Session

from sleeppdf.crud.database import init_db, make_engine
from sleeppdf.crud.models import SubscriptionTier, User


SCHEDULE_MD = """\
## 💤 6-Month-Old Sleep Schedule
### ⏰ Wake-Up — 07:00 AM
**07:00 AM**
- Morning feed
- Diaper change
### 💤 Nap: Morning
**09:00 AM – 10:00 AM**
- Dim the room
"""


@pytest.fixture(name="schedule_md")
def schedule_md_fixture():
    return SCHEDULE_MD


@pytest.fixture(name="engine")
def engine_fixture(tmp_path):
    """File-backed SQLite engine so separate sessions see committed rows."""
    engine = make_engine(f"sqlite:///{tmp_path}/test.db")
    init_db(engine)
    return engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture(name="make_user")
def make_user_fixture(session):
    def _make(email: str, tier: SubscriptionTier = SubscriptionTier.free, credits: int = 0) -> User:
        u = User(email=email, subscription_tier=tier, export_credits=credits)
        session.add(u)
        session.commit()
        return u
    return _make
