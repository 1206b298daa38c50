"""CreditsWallet model: one credit balance per organization."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base


class CreditsWallet(Base):
    """Organization credit balance. `current_credits` never goes below zero."""

    __tablename__ = "credits_wallet"
    __table_args__ = (CheckConstraint("current_credits >= 0", name="ck_credits_wallet_non_negative"),)

    org_id = Column(String, ForeignKey("organizations.id"), primary_key=True)
    current_credits = Column(Integer, nullable=False, default=0)
    credits_used = Column(Integer, nullable=False, default=0)
    plan_allocation = Column(Integer, nullable=True)
    last_topup = Column(DateTime(timezone=True), nullable=True)
    next_reset = Column(DateTime(timezone=True), nullable=True)
    stripe_customer_id = Column(String, nullable=True)

    organization = relationship("Organization", back_populates="wallet")
