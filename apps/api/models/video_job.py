"""VideoJob model: one requested video-generation unit of work."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, JSON, String
from sqlalchemy.sql import func

from database import Base


class VideoJob(Base):
    """Video job lifecycle: queued -> approved -> rendered -> ... -> posted."""

    __tablename__ = "video_jobs"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    org_id = Column(String, ForeignKey("organizations.id"), nullable=False, index=True)
    brand_id = Column(String, ForeignKey("brands.id"), nullable=True, index=True)
    trend_id = Column(String, ForeignKey("trends.id"), nullable=True, index=True)
    status = Column(String, nullable=False, default="queued", index=True)
    compliance_status = Column(String, nullable=False, default="unchecked")
    script_approved = Column(Boolean, nullable=False, default=False)
    post_targets = Column(JSON, nullable=False, default=list)
    target_vertical = Column(String, nullable=True)
    brand_label = Column(String, nullable=True)
    campaign_type = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
