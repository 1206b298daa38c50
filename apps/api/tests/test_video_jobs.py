from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select

from models.brand import Brand
from models.credits_wallet import CreditsWallet
from models.organization import Organization
from models.usage_event import UsageEvent
from models.user import User
from models.video_job import VideoJob
from services.session_token import create_access_token


AUTH_HEADER = {"Authorization": f"Bearer {create_access_token('user-test')['token']}"}


async def _wallet(session_maker, org_id: str) -> CreditsWallet:
    async with session_maker() as session:
        result = await session.execute(select(CreditsWallet).where(CreditsWallet.org_id == org_id))
        return result.scalar_one()


async def _rows(session_maker, model):
    async with session_maker() as session:
        result = await session.execute(select(model))
        return result.scalars().all()


async def _set_balance(session_maker, org_id: str, credits: int) -> None:
    async with session_maker() as session:
        wallet = (await session.execute(select(CreditsWallet).where(CreditsWallet.org_id == org_id))).scalar_one()
        wallet.current_credits = credits
        await session.commit()


@pytest.mark.asyncio
async def test_approve_script_marks_job_approved(api_client, session_maker, seeded_org):
    async with session_maker() as session:
        session.add(VideoJob(id="job-1", org_id=seeded_org, status="script_ready", post_targets=["tiktok"]))
        await session.commit()

    response = await api_client.post("/approve-script", json={"job_id": "job-1"})
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "job_id": "job-1",
        "message": "Script approved successfully. Ready for production.",
    }

    async with session_maker() as session:
        job = await session.get(VideoJob, "job-1")
        assert job.status == "approved"
        assert job.script_approved is True
        assert job.updated_at is not None


@pytest.mark.asyncio
async def test_approve_script_unknown_job_is_server_error(api_client, seeded_org):
    response = await api_client.post("/approve-script", json={"job_id": "missing-job"})
    assert response.status_code == 500
    assert "missing-job" in response.json()["error"]


@pytest.mark.asyncio
async def test_approve_script_requires_job_id(api_client):
    response = await api_client.post("/approve-script", json={})
    assert response.status_code == 500
    assert response.json() == {"error": "job_id is required"}


@pytest.mark.asyncio
async def test_recreate_charges_per_platform_and_queues_job(api_client, session_maker, seeded_org, seeded_trend):
    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend, "post_targets": ["tiktok"]},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["credits_charged"] == 130
    assert payload["message"] == "Video recreation started"

    wallet = await _wallet(session_maker, seeded_org)
    assert wallet.current_credits == 370
    assert wallet.credits_used == 130

    async with session_maker() as session:
        job = await session.get(VideoJob, payload["video_job_id"])
    assert job.org_id == seeded_org
    assert job.trend_id == seeded_trend
    assert job.brand_id is None
    assert job.status == "queued"
    assert job.compliance_status == "unchecked"
    assert job.script_approved is False
    assert job.post_targets == ["tiktok"]
    assert job.target_vertical == "Real Estate"
    assert job.brand_label == "AIRealtors247.ca"
    assert job.campaign_type == "brand_awareness"

    events = await _rows(session_maker, UsageEvent)
    assert len(events) == 1
    assert events[0].feature == "recreate_from_url"
    assert events[0].credits_cost == 130
    assert events[0].description == "Recreate video from tiktok viral trend"


@pytest.mark.asyncio
async def test_recreate_defaults_to_two_platform_targets(api_client, session_maker, seeded_org, seeded_trend):
    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 200
    assert response.json()["credits_charged"] == 140

    async with session_maker() as session:
        job = await session.get(VideoJob, response.json()["video_job_id"])
    assert job.post_targets == ["tiktok", "youtube_shorts"]
    assert (await _wallet(session_maker, seeded_org)).current_credits == 360


@pytest.mark.asyncio
async def test_recreate_empty_targets_charge_one_platform(api_client, seeded_org, seeded_trend):
    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend, "post_targets": []},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 200
    assert response.json()["credits_charged"] == 130


@pytest.mark.asyncio
async def test_recreate_uses_brand_name_when_brand_exists(api_client, session_maker, seeded_org, seeded_trend):
    async with session_maker() as session:
        session.add(Brand(id="brand-1", org_id=seeded_org, name="Harbor Homes"))
        await session.commit()

    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend, "brand_id": "brand-1", "post_targets": ["tiktok", "instagram", "facebook"]},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 200
    assert response.json()["credits_charged"] == 150

    async with session_maker() as session:
        job = await session.get(VideoJob, response.json()["video_job_id"])
    assert job.brand_id == "brand-1"
    events = await _rows(session_maker, UsageEvent)
    assert events[0].description == "Recreate video from tiktok viral trend"


@pytest.mark.asyncio
async def test_recreate_unknown_brand_falls_back_to_placeholder(api_client, session_maker, seeded_org, seeded_trend):
    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend, "brand_id": "no-such-brand", "post_targets": ["tiktok"]},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 200
    async with session_maker() as session:
        job = await session.get(VideoJob, response.json()["video_job_id"])
    assert job.brand_id is None
    assert (await _wallet(session_maker, seeded_org)).current_credits == 370


@pytest.mark.asyncio
async def test_recreate_ignores_brand_owned_by_another_org(api_client, session_maker, seeded_org, seeded_trend):
    async with session_maker() as session:
        session.add(Organization(id="org-other", name="Rival Realty"))
        await session.flush()
        session.add(Brand(id="brand-rival", org_id="org-other", name="Rival Homes"))
        await session.commit()

    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend, "brand_id": "brand-rival", "post_targets": ["tiktok"]},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 200

    async with session_maker() as session:
        job = await session.get(VideoJob, response.json()["video_job_id"])
    assert job.org_id == seeded_org
    assert job.brand_id is None


@pytest.mark.asyncio
async def test_recreate_insufficient_credits_does_not_charge(api_client, session_maker, seeded_org, seeded_trend):
    await _set_balance(session_maker, seeded_org, 139)

    with patch("services.video_jobs.charge_credits", new_callable=AsyncMock) as charge:
        response = await api_client.post(
            "/recreate-from-url",
            json={"trend_id": seeded_trend},
            headers=AUTH_HEADER,
        )

    assert response.status_code == 402
    assert response.json() == {"error": "Insufficient credits"}
    charge.assert_not_awaited()
    assert (await _wallet(session_maker, seeded_org)).current_credits == 139
    assert await _rows(session_maker, VideoJob) == []
    assert await _rows(session_maker, UsageEvent) == []


@pytest.mark.asyncio
async def test_recreate_exact_balance_is_enough(api_client, session_maker, seeded_org, seeded_trend):
    await _set_balance(session_maker, seeded_org, 130)
    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend, "post_targets": ["youtube"]},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 200
    assert (await _wallet(session_maker, seeded_org)).current_credits == 0


@pytest.mark.asyncio
async def test_recreate_without_wallet_is_payment_required(api_client, session_maker, seeded_trend):
    async with session_maker() as session:
        session.add(Organization(id="org-empty", name="No Wallet"))
        await session.flush()
        session.add(User(id="user-test", email="owner@example.com", org_id="org-empty"))
        await session.commit()

    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 402


@pytest.mark.asyncio
async def test_recreate_unknown_trend_is_not_found(api_client, session_maker, seeded_org):
    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": "missing-trend"},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Trend not found"}
    assert (await _wallet(session_maker, seeded_org)).current_credits == 500


@pytest.mark.asyncio
async def test_recreate_requires_authentication(api_client, seeded_org, seeded_trend):
    missing = await api_client.post("/recreate-from-url", json={"trend_id": seeded_trend})
    assert missing.status_code == 401
    assert missing.json() == {"error": "Unauthorized"}

    invalid = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert invalid.status_code == 401


@pytest.mark.asyncio
async def test_recreate_user_without_organization(api_client, seeded_trend):
    response = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend},
        headers=AUTH_HEADER,
    )
    assert response.status_code == 404
    assert response.json() == {"error": "User organization not found"}


@pytest.mark.asyncio
async def test_recreate_job_failure_rolls_back_charge(api_client, session_maker, seeded_org, seeded_trend):
    with patch(
        "services.video_jobs.get_brand_label_for_vertical",
        side_effect=RuntimeError("job insert failed"),
    ):
        response = await api_client.post(
            "/recreate-from-url",
            json={"trend_id": seeded_trend},
            headers=AUTH_HEADER,
        )

    assert response.status_code == 500
    assert response.json() == {"error": "job insert failed"}
    wallet = await _wallet(session_maker, seeded_org)
    assert wallet.current_credits == 500
    assert wallet.credits_used == 0
    assert await _rows(session_maker, UsageEvent) == []
    assert await _rows(session_maker, VideoJob) == []


@pytest.mark.asyncio
async def test_video_job_detail_includes_badges(api_client, seeded_org, seeded_trend):
    created = await api_client.post(
        "/recreate-from-url",
        json={"trend_id": seeded_trend, "post_targets": ["tiktok"]},
        headers=AUTH_HEADER,
    )
    job_id = created.json()["video_job_id"]

    response = await api_client.get(f"/ux/video_jobs/{job_id}", headers=AUTH_HEADER)
    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == job_id
    assert payload["status_badge"] == {"status": "queued", "label": "Queued", "icon": "clock", "variant": "secondary"}
    assert payload["compliance_badge"]["label"] == "Unchecked"

    missing = await api_client.get("/ux/video_jobs/nope", headers=AUTH_HEADER)
    assert missing.status_code == 404
