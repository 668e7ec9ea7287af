"""Database table definitions for users and saved schedule plans"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, String, Text
from sqlmodel import Field, SQLModel


class SubscriptionTier(str, Enum):
    """Billing tiers, ordered by access level"""
    free = "free"
    basic = "basic"
    premium = "premium"


class User(SQLModel, table=True):
    """An account holder; tier and remaining export credits gate PDF export"""
    __tablename__ = "users"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(..., sa_column=Column(String(320), nullable=False, unique=True, index=True))
    subscription_tier: SubscriptionTier = Field(default=SubscriptionTier.free, nullable=False)
    export_credits: int = Field(default=0, ge=0, nullable=False, description="Remaining PDF exports this period")
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class Plan(SQLModel, table=True):
    """A saved sleep schedule in markdown, owned by a single user"""
    __tablename__ = "plans"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(..., foreign_key="users.id", index=True, nullable=False)
    markdown: str = Field(..., sa_column=Column(Text, nullable=False))
    baby_age_months: Optional[int] = Field(default=None, description="Used to title the exported PDF")
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False, index=True))
