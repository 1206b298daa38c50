"""Organization credit wallet accounting."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional
import uuid

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from models.credits_wallet import CreditsWallet
from models.usage_event import UsageEvent
from services.cost_model import CREDIT_COSTS, CREDIT_PACKAGES, CREDIT_PRICE, SUBSCRIPTION_TIERS

PURCHASE_FEATURE = "credit_purchase"


async def get_wallet(
    org_id: str,
    db: AsyncSession,
    *,
    for_update: bool = False,
) -> Optional[CreditsWallet]:
    query = select(CreditsWallet).where(CreditsWallet.org_id == org_id)
    if for_update:
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_credit_balance(org_id: str, db: AsyncSession) -> int:
    wallet = await get_wallet(org_id, db)
    if wallet is None:
        return 0
    return int(wallet.current_credits or 0)


async def charge_credits(
    org_id: str,
    db: AsyncSession,
    *,
    feature: str,
    cost: int,
    description: Optional[str] = None,
    commit: bool = True,
) -> Dict[str, Any]:
    """Debit `cost` credits and record a usage event.

    With ``commit=False`` the debit is only flushed so the caller can commit
    it together with its own writes, or roll both back.
    """
    debit_cost = max(int(cost), 0)
    wallet = await get_wallet(org_id, db, for_update=True)
    balance = int(wallet.current_credits or 0) if wallet is not None else 0
    if wallet is None or balance < debit_cost:
        raise HTTPException(status_code=402, detail="Insufficient credits")

    wallet.current_credits = balance - debit_cost
    wallet.credits_used = int(wallet.credits_used or 0) + debit_cost
    db.add(
        UsageEvent(
            id=str(uuid.uuid4()),
            org_id=org_id,
            entry_type="charge",
            feature=feature,
            credits_cost=debit_cost,
            description=description,
        )
    )
    await db.flush()
    if commit:
        await db.commit()
    return {"charged": debit_cost, "balance_after": int(wallet.current_credits)}


async def add_credits(
    org_id: str,
    db: AsyncSession,
    *,
    amount: int,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    grant = int(amount)
    if grant <= 0:
        raise HTTPException(status_code=400, detail="credits must be greater than 0")

    wallet = await get_wallet(org_id, db, for_update=True)
    if wallet is None:
        wallet = CreditsWallet(org_id=org_id, current_credits=0, credits_used=0)
        db.add(wallet)
    wallet.current_credits = int(wallet.current_credits or 0) + grant
    wallet.last_topup = datetime.now(timezone.utc)
    db.add(
        UsageEvent(
            id=str(uuid.uuid4()),
            org_id=org_id,
            entry_type="purchase",
            feature=PURCHASE_FEATURE,
            credits_cost=grant,
            description=description,
        )
    )
    await db.flush()
    await db.commit()
    return {"credits_added": grant, "balance_after": int(wallet.current_credits)}


async def get_credit_summary(org_id: str, db: AsyncSession) -> Dict[str, Any]:
    wallet = await get_wallet(org_id, db)
    result = await db.execute(
        select(UsageEvent)
        .where(UsageEvent.org_id == org_id)
        .order_by(UsageEvent.created_at.desc())
        .limit(30)
    )
    events = result.scalars().all()
    return {
        "org_id": org_id,
        "balance": int(wallet.current_credits or 0) if wallet else 0,
        "credits_used": int(wallet.credits_used or 0) if wallet else 0,
        "last_topup": wallet.last_topup.isoformat() if wallet and wallet.last_topup else None,
        "credit_price_usd": CREDIT_PRICE,
        "costs": dict(CREDIT_COSTS),
        "packages": [dict(package) for package in CREDIT_PACKAGES],
        "subscription_tiers": [dict(tier) for tier in SUBSCRIPTION_TIERS],
        "recent_events": [
            {
                "id": event.id,
                "entry_type": event.entry_type,
                "feature": event.feature,
                "credits_cost": event.credits_cost,
                "description": event.description,
                "created_at": event.created_at.isoformat() if event.created_at else None,
            }
            for event in events
        ],
    }
