"""Organization model: the billing unit that owns users and a credit wallet."""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from database import Base


class Organization(Base):
    """Billing/credit-holding organization."""

    __tablename__ = "organizations"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    plan_tier = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    users = relationship("User", back_populates="organization")
    wallet = relationship("CreditsWallet", back_populates="organization", uselist=False)
    brands = relationship("Brand", back_populates="organization", cascade="all, delete-orphan")
