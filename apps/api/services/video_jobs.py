"""Video job services: script approval and recreation from a trend."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, Dict, Optional, Sequence, Tuple
import uuid

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from models.brand import Brand
from models.trend import Trend
from models.video_job import VideoJob
from services.brand_routing import get_brand_label_for_vertical
from services.cost_model import recreate_cost, resolve_post_targets
from services.credits import charge_credits, get_credit_balance
from services.organizations import get_user_org_id
from services.status_badges import compliance_badge, job_status_badge

logger = logging.getLogger(__name__)

PLACEHOLDER_BRAND_NAME = "Your Brand"
RECREATE_FEATURE = "recreate_from_url"
DEFAULT_CAMPAIGN_TYPE = "brand_awareness"


def serialize_video_job(job: VideoJob) -> Dict[str, Any]:
    return {
        "id": job.id,
        "org_id": job.org_id,
        "brand_id": job.brand_id,
        "trend_id": job.trend_id,
        "status": job.status,
        "compliance_status": job.compliance_status,
        "script_approved": bool(job.script_approved),
        "post_targets": list(job.post_targets or []),
        "target_vertical": job.target_vertical,
        "brand_label": job.brand_label,
        "campaign_type": job.campaign_type,
        "created_at": job.created_at.isoformat() if job.created_at else None,
        "updated_at": job.updated_at.isoformat() if job.updated_at else None,
        "status_badge": job_status_badge(job.status),
        "compliance_badge": compliance_badge(job.compliance_status),
    }


async def approve_script_service(*, job_id: Optional[str], db: AsyncSession) -> Dict[str, Any]:
    if not job_id:
        raise HTTPException(status_code=500, detail="job_id is required")

    result = await db.execute(select(VideoJob).where(VideoJob.id == str(job_id)))
    job = result.scalar_one_or_none()
    if job is None:
        raise HTTPException(status_code=500, detail=f"No video job found for id {job_id}")

    job.script_approved = True
    job.status = "approved"
    job.updated_at = datetime.now(timezone.utc)
    await db.commit()

    logger.info("Script approved for job=%s", job_id)
    return {
        "success": True,
        "job_id": job_id,
        "message": "Script approved successfully. Ready for production.",
    }


async def _resolve_brand(
    brand_id: Optional[str], org_id: str, db: AsyncSession
) -> Tuple[Optional[str], str]:
    """Return (brand id, brand name) for a brand owned by `org_id`.

    Unknown brands and brands of other organizations resolve to
    (None, placeholder).
    """
    if not brand_id:
        return None, PLACEHOLDER_BRAND_NAME
    try:
        result = await db.execute(select(Brand).where(Brand.id == str(brand_id), Brand.org_id == org_id))
        brand = result.scalar_one_or_none()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.warning("Brand lookup failed brand_id=%s: %s", brand_id, exc)
        return None, PLACEHOLDER_BRAND_NAME
    if brand is None:
        return None, PLACEHOLDER_BRAND_NAME
    return brand.id, brand.name or PLACEHOLDER_BRAND_NAME


async def recreate_from_url_service(
    *,
    user_id: str,
    trend_id: Optional[str],
    brand_id: Optional[str],
    post_targets: Optional[Sequence[str]],
    db: AsyncSession,
) -> Dict[str, Any]:
    """Charge credits for a recreation and queue its video job.

    The charge and the job insert are committed together; if the insert
    fails the charge is rolled back.
    """
    org_id = await get_user_org_id(user_id, db)
    if not org_id:
        raise HTTPException(status_code=404, detail="User organization not found")

    trend: Optional[Trend] = None
    if trend_id:
        result = await db.execute(select(Trend).where(Trend.id == str(trend_id)))
        trend = result.scalar_one_or_none()
    if trend is None:
        raise HTTPException(status_code=404, detail="Trend not found")

    source_trend_id = trend.id
    source_platform = trend.platform
    target_vertical = trend.category or "general"

    resolved_brand_id, brand_name = await _resolve_brand(brand_id, org_id, db)
    targets = resolve_post_targets(post_targets)
    credits_cost = recreate_cost(post_targets)

    balance = await get_credit_balance(org_id, db)
    if balance < credits_cost:
        logger.info(
            "Insufficient credits org=%s balance=%s required=%s", org_id, balance, credits_cost
        )
        raise HTTPException(status_code=402, detail="Insufficient credits")

    try:
        await charge_credits(
            org_id,
            db,
            feature=RECREATE_FEATURE,
            cost=credits_cost,
            description=f"Recreate video from {source_platform} viral trend",
            commit=False,
        )
        job = VideoJob(
            id=str(uuid.uuid4()),
            org_id=org_id,
            brand_id=resolved_brand_id,
            trend_id=source_trend_id,
            status="queued",
            compliance_status="unchecked",
            script_approved=False,
            post_targets=targets,
            target_vertical=target_vertical,
            brand_label=get_brand_label_for_vertical(target_vertical),
            campaign_type=DEFAULT_CAMPAIGN_TYPE,
        )
        db.add(job)
        await db.flush()
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(
        "Video job created id=%s org=%s brand=%s charged=%s", job.id, org_id, brand_name, credits_cost
    )
    return {
        "video_job_id": job.id,
        "credits_charged": credits_cost,
        "message": "Video recreation started",
    }


async def get_video_job_service(*, user_id: str, job_id: str, db: AsyncSession) -> Dict[str, Any]:
    org_id = await get_user_org_id(user_id, db)
    if not org_id:
        raise HTTPException(status_code=404, detail="User organization not found")
    result = await db.execute(
        select(VideoJob).where(VideoJob.id == job_id, VideoJob.org_id == org_id)
    )
    job = result.scalar_one_or_none()
    if job is None:
        raise HTTPException(status_code=404, detail="Video job not found")
    return serialize_video_job(job)
