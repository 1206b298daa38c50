"""Billing and credits router."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database import get_db
from routers.auth_scope import AuthContext, get_auth_context, require_org_id
from routers.cors import handler_errors, preflight_response
from routers.rate_limit import rate_limit
from services.credits import add_credits, get_credit_summary, get_wallet

router = APIRouter()
logger = logging.getLogger(__name__)


class PurchaseCreditsRequest(BaseModel):
    credits: Optional[Any] = None
    paymentMethodId: Optional[str] = None


def _parse_credits(value: Any) -> int:
    invalid = (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or (isinstance(value, float) and not value.is_integer())
        or value <= 0
    )
    if invalid:
        raise HTTPException(status_code=400, detail="credits must be a positive integer")
    return int(value)


@router.options("/purchase-credits", include_in_schema=False)
async def purchase_credits_preflight():
    return preflight_response()


@router.post("/purchase-credits")
async def purchase_credits(
    request: PurchaseCreditsRequest,
    _rate_limit: None = Depends(
        rate_limit("purchase_credits", limit=settings.RATE_LIMIT_PURCHASE_PER_HOUR)
    ),
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
):
    with handler_errors("purchase-credits"):
        org_id = await require_org_id(auth, db)

        credits = _parse_credits(request.credits)
        amount_cents = credits  # 1 credit = 1 cent

        if settings.STRIPE_CREDITS_PRICE_ID:
            # Payment intent creation is not wired yet; credits are granted directly.
            wallet = await get_wallet(org_id, db)
            logger.info(
                "Credit purchase org=%s amount_cents=%s price=%s customer=%s payment_method=%s",
                org_id,
                amount_cents,
                settings.STRIPE_CREDITS_PRICE_ID,
                wallet.stripe_customer_id if wallet else None,
                request.paymentMethodId,
            )

        await add_credits(
            org_id,
            db,
            amount=credits,
            description=f"Purchased {credits} credits",
        )
        return {"success": True, "credits_added": credits}


@router.get("/credits")
async def credits_summary(
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
):
    org_id = await require_org_id(auth, db)
    return await get_credit_summary(org_id, db)
