"""Trend ingestion services."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional
import uuid

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from models.trend import Trend

logger = logging.getLogger(__name__)

SUPPORTED_TREND_PLATFORMS = ("tiktok", "youtube", "instagram", "facebook", "x")
# Upper bound of the `views` INTEGER column.
MAX_VIEW_COUNT = 2**31 - 1


def _safe_int(value: Any, default: int = 0) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number) or abs(number) > MAX_VIEW_COUNT:
        return default
    return int(number)


def serialize_trend(trend: Trend) -> Dict[str, Any]:
    return {
        "id": trend.id,
        "platform": trend.platform,
        "source_video_url": trend.source_video_url,
        "category": trend.category,
        "title": trend.title,
        "views": trend.views,
        "likes": trend.likes,
        "comments": trend.comments,
        "engagement_score": trend.engagement_score,
        "thumbnail_url": trend.thumbnail_url,
        "brand_notes": trend.brand_notes,
        "captured_at": trend.captured_at.isoformat() if trend.captured_at else None,
    }


def validate_trend_input(platform: Any, video_url: Any) -> None:
    if not isinstance(platform, str) or platform not in SUPPORTED_TREND_PLATFORMS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid platform. Must be one of: {', '.join(SUPPORTED_TREND_PLATFORMS)}",
        )
    if not video_url or not isinstance(video_url, str):
        raise HTTPException(status_code=400, detail="Video URL is required")


async def _find_trend(db: AsyncSession, platform: str, video_url: str) -> Optional[Trend]:
    result = await db.execute(
        select(Trend).where(Trend.platform == platform, Trend.source_video_url == video_url)
    )
    return result.scalar_one_or_none()


def _apply_fields(trend: Trend, fields: Dict[str, Any]) -> None:
    for key, value in fields.items():
        setattr(trend, key, value)


async def add_trending_url_service(
    *,
    platform: Any,
    video_url: Any,
    category: Optional[str] = None,
    title: Optional[str] = None,
    view_count: Any = None,
    thumbnail_url: Optional[str] = None,
    brand_notes: Optional[str] = None,
    db: AsyncSession,
) -> Dict[str, Any]:
    """Insert a trend, or overwrite the one already stored for (platform, url)."""
    validate_trend_input(platform, video_url)

    fields: Dict[str, Any] = {
        "category": category or "general",
        "title": title or "Untitled",
        "views": _safe_int(view_count, 0),
        "thumbnail_url": thumbnail_url or None,
        "brand_notes": brand_notes or None,
        "engagement_score": 0,
        "likes": 0,
        "comments": 0,
    }

    trend = await _find_trend(db, platform, video_url)
    if trend is None:
        trend = Trend(id=str(uuid.uuid4()), platform=platform, source_video_url=video_url)
        _apply_fields(trend, fields)
        db.add(trend)
        try:
            await db.commit()
        except IntegrityError:
            # Inserted concurrently by another request; update that row instead.
            await db.rollback()
            trend = await _find_trend(db, platform, video_url)
            if trend is None:
                raise
            _apply_fields(trend, fields)
            await db.commit()
    else:
        _apply_fields(trend, fields)
        await db.commit()

    await db.refresh(trend)
    logger.info("Trend stored id=%s platform=%s", trend.id, trend.platform)
    return {"trend": serialize_trend(trend)}
