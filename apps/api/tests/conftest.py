import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from database import Base, get_db
from main import app
from models.credits_wallet import CreditsWallet
from models.organization import Organization
from models.trend import Trend
from models.user import User
from routers import rate_limit
from services.session_token import create_access_token


TEST_ORG_ID = "org-test"
TEST_USER_ID = "user-test"
TEST_AUTH_HEADER = {"Authorization": f"Bearer {create_access_token(TEST_USER_ID, 'owner@example.com')['token']}"}


@pytest.fixture(autouse=True)
def reset_local_rate_limit_counters():
    """Keep in-memory rate-limit state isolated between tests."""
    previous = getattr(app.state, "disable_rate_limits", False)
    app.state.disable_rate_limits = True
    rate_limit._local_counters.clear()
    yield
    rate_limit._local_counters.clear()
    app.state.disable_rate_limits = previous


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    db_path = tmp_path / "viral_recreate.db"
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield maker

    await engine.dispose()


@pytest_asyncio.fixture
async def api_client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.pop(get_db, None)


@pytest_asyncio.fixture
async def seeded_org(session_maker):
    """Organization with one member (the test caller) and a 500 credit wallet."""
    async with session_maker() as session:
        session.add(Organization(id=TEST_ORG_ID, name="Test Org", plan_tier="growth"))
        await session.flush()
        session.add(User(id=TEST_USER_ID, email="owner@example.com", org_id=TEST_ORG_ID, role="owner"))
        session.add(CreditsWallet(org_id=TEST_ORG_ID, current_credits=500, credits_used=0))
        await session.commit()
    return TEST_ORG_ID


@pytest_asyncio.fixture
async def seeded_trend(session_maker):
    async with session_maker() as session:
        trend = Trend(
            id="trend-1",
            platform="tiktok",
            source_video_url="https://www.tiktok.com/@agent/video/123",
            category="Real Estate",
            title="Open house walkthrough",
            views=250000,
        )
        session.add(trend)
        await session.commit()
    return "trend-1"
