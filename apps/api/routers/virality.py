"""Virality profile maintenance router."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from routers.cors import handler_errors, preflight_response
from services.virality import refresh_virality_profiles_service

router = APIRouter()


@router.options("/refresh-virality-profiles", include_in_schema=False)
async def refresh_virality_profiles_preflight():
    return preflight_response()


@router.post("/refresh-virality-profiles")
async def refresh_virality_profiles(db: AsyncSession = Depends(get_db)):
    with handler_errors("refresh-virality-profiles"):
        return await refresh_virality_profiles_service(db)
