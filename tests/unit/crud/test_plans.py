"""Unit tests for crud/plans.py"""

from datetime import datetime, timedelta
from uuid import uuid4

from sleeppdf.crud.models import Plan
from sleeppdf.crud.plans import create_plan, get_plan, list_plans
from sleeppdf.crud.users import create_user


def test_create_plan(session, user):
    plan = create_plan(session, user, "## Nap\n- Dim", baby_age_months=6)
    assert plan.user_id == user.id
    assert plan.baby_age_months == 6
    assert session.get(Plan, plan.id) is plan


def test_get_plan_owned(session, user):
    plan = create_plan(session, user, "## Nap")
    assert get_plan(session, user, plan.id) is plan


def test_get_plan_other_owner_hidden(session, user):
    """A plan owned by someone else is reported as missing."""
    other = create_user(session, "other@example.com")
    plan = create_plan(session, other, "## Nap")
    assert get_plan(session, user, plan.id) is None


def test_get_plan_unknown_id(session, user):
    assert get_plan(session, user, uuid4()) is None


def test_list_plans_newest_first(session, user):
    """Only the user's own plans are listed, most recent first."""
    now = datetime.now()
    old = Plan(user_id=user.id, markdown="old", created_at=now - timedelta(days=1))
    new = Plan(user_id=user.id, markdown="new", created_at=now)
    session.add_all([old, new])
    create_plan(session, create_user(session, "other@example.com"), "theirs")
    session.flush()

    assert [p.markdown for p in list_plans(session, user)] == ["new", "old"]


def test_list_plans_empty(session, user):
    assert list_plans(session, user) == []
