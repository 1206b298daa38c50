"""Per-platform virality tuning parameters."""

from sqlalchemy import Column, DateTime, Integer, JSON, String

from database import Base


class PlatformViralityProfile(Base):
    """Tuning profile per platform. Only `last_synced` is refreshed today."""

    __tablename__ = "platform_virality_profiles"

    platform = Column(String, primary_key=True)
    hook_window_seconds = Column(Integer, nullable=True)
    ideal_length_seconds = Column(Integer, nullable=True)
    hashtag_strategy = Column(JSON, nullable=True)
    caption_style = Column(String, nullable=True)
    engagement_triggers = Column(JSON, nullable=True)
    audio_rules = Column(JSON, nullable=True)
    visual_rules = Column(JSON, nullable=True)
    update_frequency_days = Column(Integer, nullable=True)
    last_synced = Column(DateTime(timezone=True), nullable=True)
