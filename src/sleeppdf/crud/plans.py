"""Saved schedule plans: creation and owner-scoped lookup"""

from uuid import UUID

from sqlmodel import Session, select

from sleeppdf.crud.models import Plan, User


def create_plan(session: Session, user: User, markdown: str, baby_age_months: int | None = None) -> Plan:
    """Insert a plan owned by user. Flushes but does not commit."""
    plan = Plan(user_id=user.id, markdown=markdown, baby_age_months=baby_age_months)
    session.add(plan)
    session.flush()
    return plan


def get_plan(session: Session, user: User, plan_id: UUID) -> Plan | None:
    """Return the plan if it exists and belongs to user, else None."""
    plan = session.get(Plan, plan_id)
    if plan is None or plan.user_id != user.id:
        return None
    return plan


def list_plans(session: Session, user: User) -> list[Plan]:
    """Return the user's plans, newest first."""
    stmt = select(Plan).where(Plan.user_id == user.id).order_by(Plan.created_at.desc())
    return list(session.exec(stmt).all())
