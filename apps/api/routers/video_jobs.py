"""Video job router: script approval and recreation from a viral trend."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database import get_db
from routers.auth_scope import AuthContext, get_auth_context
from routers.cors import handler_errors, preflight_response
from routers.rate_limit import rate_limit
from services.video_jobs import approve_script_service, recreate_from_url_service

router = APIRouter()
logger = logging.getLogger(__name__)


class ApproveScriptRequest(BaseModel):
    job_id: Optional[str] = None


class RecreateFromUrlRequest(BaseModel):
    trend_id: Optional[str] = None
    brand_id: Optional[str] = None
    post_targets: Optional[List[str]] = None


@router.options("/approve-script", include_in_schema=False)
async def approve_script_preflight():
    return preflight_response()


@router.post("/approve-script")
async def approve_script(
    request: ApproveScriptRequest,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Approving script for job=%s", request.job_id)
    with handler_errors("approve-script"):
        return await approve_script_service(job_id=request.job_id, db=db)


@router.options("/recreate-from-url", include_in_schema=False)
async def recreate_from_url_preflight():
    return preflight_response()


@router.post("/recreate-from-url")
async def recreate_from_url(
    request: RecreateFromUrlRequest,
    _rate_limit: None = Depends(
        rate_limit("recreate_from_url", limit=settings.RATE_LIMIT_RECREATE_PER_HOUR)
    ),
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
):
    logger.info(
        "Recreating video from URL trend_id=%s brand_id=%s post_targets=%s",
        request.trend_id,
        request.brand_id,
        request.post_targets,
    )
    with handler_errors("recreate-from-url"):
        return await recreate_from_url_service(
            user_id=auth.user_id,
            trend_id=request.trend_id,
            brand_id=request.brand_id,
            post_targets=request.post_targets,
            db=db,
        )
