"""UsageEvent model for per-organization credit movements."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from database import Base


class UsageEvent(Base):
    """Immutable record of one credit charge or purchase.

    `credits_cost` is always positive; `entry_type` says which way it moved.
    """

    __tablename__ = "usage_events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    org_id = Column(String, ForeignKey("organizations.id"), nullable=False, index=True)
    entry_type = Column(String, nullable=False, default="charge", server_default="charge")
    feature = Column(String, nullable=False)
    credits_cost = Column(Integer, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
