# 테스트 공용 fixture
# - mongomock_motor로 메모리 MongoDB를 만들고 Beanie를 초기화
# - httpx AsyncClient를 앱에 직접 연결 (실제 서버/DB 불필요)

import os
import uuid

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from devconnector.core.database import MongoStore
from devconnector.main import create_app


@pytest_asyncio.fixture
async def store():
    mongo_client = AsyncMongoMockClient()
    mongo_store = MongoStore(mongo_client, mongo_client["devconnector_test"])
    await mongo_store.open()
    return mongo_store


@pytest_asyncio.fixture
async def client(store):
    transport = ASGITransport(app=create_app(store))
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def register(client):
    """가입 후 (인증 헤더, 사용자 JSON)을 돌려주는 factory"""

    async def _register(name: str = "Alice", email: str = None, password: str = "secret123"):
        email = email or f"{uuid.uuid4().hex[:8]}@example.com"
        resp = await client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 200, resp.text
        body = resp.json()
        return {"x-auth-token": body["token"]}, body["user"]

    return _register
