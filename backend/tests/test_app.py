# 앱 기본 엔드포인트 테스트
from unittest.mock import AsyncMock, patch

import pytest

pytestmark = pytest.mark.asyncio


async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True


async def test_health_reports_database(client, store):
    with patch.object(store, "ping", AsyncMock(return_value=True)):
        ok = await client.get("/health")
    with patch.object(store, "ping", AsyncMock(return_value=False)):
        down = await client.get("/health")
    assert ok.json() == {"status": "ok", "database": "connected"}
    assert down.status_code == 503
