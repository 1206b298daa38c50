"""Trend ingestion router."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from routers.cors import handler_errors, preflight_response
from services.trends import add_trending_url_service

router = APIRouter()
logger = logging.getLogger(__name__)


class AddTrendingUrlRequest(BaseModel):
    # platform/video_url are checked by the service so bad values get a 400.
    platform: Optional[Any] = None
    video_url: Optional[Any] = None
    category: Optional[str] = None
    title: Optional[str] = None
    view_count: Optional[Any] = None
    thumbnail_url: Optional[str] = None
    brand_notes: Optional[str] = None


@router.options("/add-trending-url", include_in_schema=False)
async def add_trending_url_preflight():
    return preflight_response()


@router.post("/add-trending-url")
async def add_trending_url(
    request: AddTrendingUrlRequest,
    db: AsyncSession = Depends(get_db),
):
    logger.info(
        "Adding trending URL platform=%s video_url=%s category=%s title=%s",
        request.platform,
        request.video_url,
        request.category,
        request.title,
    )
    with handler_errors("add-trending-url"):
        return await add_trending_url_service(
            platform=request.platform,
            video_url=request.video_url,
            category=request.category,
            title=request.title,
            view_count=request.view_count,
            thumbnail_url=request.thumbnail_url,
            brand_notes=request.brand_notes,
            db=db,
        )
