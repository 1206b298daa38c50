"""UX-facing endpoints: status badge tables and job detail for the dashboard."""

from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from routers.auth_scope import AuthContext, get_auth_context
from services.status_badges import COMPLIANCE_BADGES, JOB_STATUS_BADGES
from services.video_jobs import get_video_job_service

router = APIRouter()


class StatusBadgesResponse(BaseModel):
    job_statuses: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    compliance_statuses: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    default_job_status: str = "queued"
    default_compliance_status: str = "unchecked"


@router.get("/status_badges", response_model=StatusBadgesResponse)
async def get_status_badges():
    return StatusBadgesResponse(
        job_statuses=JOB_STATUS_BADGES,
        compliance_statuses=COMPLIANCE_BADGES,
    )


@router.get("/video_jobs/{job_id}")
async def get_video_job(
    job_id: str,
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
):
    return await get_video_job_service(user_id=auth.user_id, job_id=job_id, db=db)
