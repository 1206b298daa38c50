"""Caller resolution: bearer token to user, user to organization.

Credits, brands and video jobs belong to an organization, so handlers that
touch them resolve the caller's org before doing anything else.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from services.organizations import get_user_org_id
from services.session_token import decode_access_token


bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class AuthContext:
    user_id: str
    email: Optional[str] = None
    role: str = "authenticated"


async def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthContext:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        claims = decode_access_token(credentials.credentials)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail="Unauthorized") from exc

    return AuthContext(
        user_id=str(claims["sub"]),
        email=claims.get("email") or None,
        role=str(claims.get("role") or "authenticated"),
    )


async def require_org_id(
    auth: AuthContext,
    db: AsyncSession,
    *,
    detail: str = "Organization not found",
) -> str:
    """Return the caller's organization id or raise 404 with `detail`."""
    org_id = await get_user_org_id(auth.user_id, db)
    if not org_id:
        raise HTTPException(status_code=404, detail=detail)
    return org_id
