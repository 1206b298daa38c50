from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from routers import rate_limit


def _request(host: str = "10.0.0.1"):
    return SimpleNamespace(
        app=SimpleNamespace(state=SimpleNamespace(disable_rate_limits=False)),
        headers={},
        client=SimpleNamespace(host=host),
    )


@pytest.mark.asyncio
async def test_local_fallback_enforces_quota(monkeypatch):
    async def _redis_down(*_args, **_kwargs):
        raise ConnectionError("redis unavailable")

    monkeypatch.setattr(rate_limit, "_consume_redis_quota", _redis_down)
    dependency = rate_limit.rate_limit("unit_test", limit=2, window_seconds=60)

    await dependency(_request())
    await dependency(_request())
    with pytest.raises(HTTPException) as exc_info:
        await dependency(_request())
    assert exc_info.value.status_code == 429
    assert int(exc_info.value.headers["Retry-After"]) >= 1

    # Quotas are per client.
    await dependency(_request(host="10.0.0.2"))


@pytest.mark.asyncio
async def test_disabled_rate_limits_skip_counting():
    request = _request()
    request.app.state.disable_rate_limits = True
    dependency = rate_limit.rate_limit("unit_test_disabled", limit=0, window_seconds=60)
    await dependency(request)
    assert rate_limit._local_counters == {}
