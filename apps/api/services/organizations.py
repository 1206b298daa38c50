"""Caller-to-organization resolution."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from models.user import User


async def get_user_org_id(user_id: str, db: AsyncSession) -> Optional[str]:
    result = await db.execute(select(User.org_id).where(User.id == user_id))
    org_id = result.scalar_one_or_none()
    return str(org_id) if org_id else None
