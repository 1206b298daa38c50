"""Trend model for discovered viral videos."""

from sqlalchemy import Column, String, DateTime, Float, Integer, Text, UniqueConstraint
from sqlalchemy.sql import func
import uuid

from database import Base


class Trend(Base):
    """A viral video reference used as a recreation template."""

    __tablename__ = "trends"
    __table_args__ = (
        UniqueConstraint("platform", "source_video_url", name="uq_trends_platform_source_video_url"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    platform = Column(String, nullable=False, index=True)
    source_video_url = Column(String, nullable=False)
    category = Column(String, nullable=True, index=True)
    title = Column(String, nullable=True)
    views = Column(Integer, nullable=False, default=0)
    likes = Column(Integer, nullable=False, default=0)
    comments = Column(Integer, nullable=False, default=0)
    engagement_score = Column(Float, nullable=False, default=0)
    thumbnail_url = Column(String, nullable=True)
    brand_notes = Column(Text, nullable=True)
    captured_at = Column(DateTime(timezone=True), server_default=func.now())
