"""User persistence, subscription tiers and export credit accounting"""

import logging
from uuid import UUID

from sqlalchemy import update
from sqlmodel import Session, select

from sleeppdf.crud.models import SubscriptionTier, User


logger = logging.getLogger(__name__)

TIER_LEVELS = {
    SubscriptionTier.free: 0,
    SubscriptionTier.basic: 1,
    SubscriptionTier.premium: 2,
}


def get_user(session: Session, user_id: UUID) -> User | None:
    return session.get(User, user_id)


def get_user_by_email(session: Session, email: str) -> User | None:
    """Return the User with the given email (case-insensitive), or None if not found."""
    return session.exec(select(User).where(User.email == email.strip().lower())).first()


def create_user(session: Session, email: str) -> User:
    """Insert a free-tier user. Raises ValueError if the email is already registered.

    Flushes but does not commit; caller controls the transaction.
    """
    if get_user_by_email(session, email):
        raise ValueError(f"User already exists: {email}")
    user = User(email=email.strip().lower())
    session.add(user)
    session.flush()
    return user


def has_access(user: User, required: SubscriptionTier) -> bool:
    """True if the user's tier is at or above the required tier."""
    return TIER_LEVELS.get(user.subscription_tier, 0) >= TIER_LEVELS[required]


def set_tier(session: Session, user: User, tier: SubscriptionTier, credits: int) -> User:
    """Assign a tier and reset export credits to that tier's allowance (always 0 for free)."""
    user.subscription_tier = tier
    user.export_credits = credits if tier != SubscriptionTier.free else 0
    session.add(user)
    session.flush()
    logger.info("user %s -> %s tier, %d credit(s)", user.email, tier.value, user.export_credits)
    return user


def check_export_access(user: User) -> None:
    """Raise PermissionError unless the user may export a PDF right now."""
    if not has_access(user, SubscriptionTier.basic):
        raise PermissionError("You need a subscription to export PDFs")
    if user.subscription_tier == SubscriptionTier.basic and user.export_credits <= 0:
        raise PermissionError("You've used all your export credits for this month")


def consume_export_credit(session: Session, user: User) -> None:
    """Charge one export credit; only basic users are metered.

    The decrement runs in the database so concurrent exports cannot lose a
    charge. Raises PermissionError if the stored balance is already zero.
    Flushes but does not commit; caller controls the transaction.
    """
    if user.subscription_tier != SubscriptionTier.basic:
        return
    result = session.exec(
        update(User)
        .where(User.id == user.id, User.export_credits > 0)
        .values(export_credits=User.export_credits - 1)
    )
    if result.rowcount == 0:
        raise PermissionError("You've used all your export credits for this month")
    session.refresh(user)
    logger.info("user %s has %d export credit(s) left", user.email, user.export_credits)


def access_summary(user: User) -> dict:
    """Return {active, tier, export_credits} for display."""
    return {
        "active": user.subscription_tier != SubscriptionTier.free,
        "tier": user.subscription_tier.value,
        "export_credits": user.export_credits,
    }
