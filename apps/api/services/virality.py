"""Platform virality profile maintenance."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, Dict

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from models.platform_virality_profile import PlatformViralityProfile

logger = logging.getLogger(__name__)


async def refresh_virality_profiles_service(db: AsyncSession) -> Dict[str, Any]:
    """Stamp every platform profile as synced.

    Pattern extraction (hook windows, ideal lengths, hashtag mix, caption
    style, engagement triggers, audio rules) is not implemented; only
    `last_synced` moves.
    """
    now = datetime.now(timezone.utc)
    result = await db.execute(
        update(PlatformViralityProfile)
        .where(PlatformViralityProfile.platform != "")
        .values(last_synced=now)
    )
    await db.commit()
    logger.info("Virality profiles refreshed count=%s", result.rowcount)
    return {
        "success": True,
        "message": "Virality profiles refreshed",
        "timestamp": now.isoformat(),
    }
