# 회원가입/로그인/계정 API 테스트
import asyncio
import time
from unittest.mock import AsyncMock, patch

import pytest
from beanie import PydanticObjectId
from passlib.context import CryptContext
from pymongo.errors import PyMongoError

from devconnector.core import security
from devconnector.core.exceptions import UserExists
from devconnector.core.security import decode_access_token
from devconnector.models.post import Post
from devconnector.models.profile import Profile
from devconnector.models.user import User
from devconnector.repositories.user_repository import UserRepository

pytestmark = pytest.mark.asyncio


async def test_register_returns_token_for_new_user(client):
    resp = await client.post(
        "/api/users",
        json={"name": "Alice", "email": "alice@example.com", "password": "secret123"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert decode_access_token(body["token"]) == body["user"]["id"]
    assert body["user"]["name"] == "Alice"
    assert "password" not in body["user"]

    stored = await User.find_one(User.email == "alice@example.com")
    assert str(stored.id) == body["user"]["id"]
    assert stored.password != "secret123"


async def test_register_sets_gravatar_avatar(register):
    _, user = await register(email="bob@example.com")
    assert user["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert "s=200" in user["avatar"] and "r=pg" in user["avatar"] and "d=mm" in user["avatar"]


async def test_register_duplicate_email_is_rejected(client, register):
    await register(email="dup@example.com")
    resp = await client.post(
        "/api/users",
        json={"name": "Other", "email": "dup@example.com", "password": "another1"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"errors": [{"msg": "User already exists"}]}
    assert await User.find(User.email == "dup@example.com").count() == 1


@pytest.mark.parametrize(
    "payload, param",
    [
        ({"name": "", "email": "a@example.com", "password": "secret123"}, "name"),
        ({"name": "A", "email": "not-an-email", "password": "secret123"}, "email"),
        ({"name": "A", "email": "a@example.com", "password": "12345"}, "password"),
    ],
)
async def test_register_validation_errors(client, payload, param):
    resp = await client.post("/api/users", json=payload)
    assert resp.status_code == 400
    assert [e["param"] for e in resp.json()["errors"]] == [param]
    assert await User.find_all().count() == 0


async def test_login_with_correct_credentials(client, register):
    _, user = await register(email="carol@example.com", password="pa55word")
    resp = await client.post("/api/auth", json={"email": "carol@example.com", "password": "pa55word"})
    assert resp.status_code == 200
    body = resp.json()
    assert decode_access_token(body["token"]) == user["id"]
    assert "password" not in body["user"]


async def test_login_failures_look_the_same(client, register):
    await register(email="dave@example.com", password="pa55word")
    wrong_password = await client.post("/api/auth", json={"email": "dave@example.com", "password": "nope"})
    wrong_email = await client.post("/api/auth", json={"email": "nobody@example.com", "password": "pa55word"})
    assert wrong_password.status_code == wrong_email.status_code == 400
    assert wrong_password.json() == wrong_email.json() == {"errors": [{"msg": "Invalid credentials."}]}


async def test_login_requires_password(client):
    resp = await client.post("/api/auth", json={"email": "dave@example.com", "password": ""})
    assert resp.status_code == 400


async def test_get_current_user_hides_password(client, register):
    headers, user = await register()
    resp = await client.get("/api/auth", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == user["id"]
    assert "password" not in resp.json()


async def test_bearer_authorization_header_is_accepted(client, register):
    headers, user = await register()
    bearer = {"Authorization": f"Bearer {headers['x-auth-token']}"}
    resp = await client.get("/api/auth", headers=bearer)
    assert resp.status_code == 200
    assert resp.json()["id"] == user["id"]


async def test_missing_token_is_rejected(client):
    resp = await client.get("/api/auth")
    assert resp.status_code == 401
    assert resp.json() == {"msg": "No token, authorization denied"}


async def test_invalid_token_is_rejected(client):
    resp = await client.get("/api/auth", headers={"x-auth-token": "garbage"})
    assert resp.status_code == 401
    assert resp.json() == {"msg": "Token is not valid"}


async def test_token_for_deleted_user_reports_missing_user(client, register):
    headers, _ = await register()
    await client.delete("/api/auth", headers=headers)
    resp = await client.get("/api/auth", headers=headers)
    assert resp.status_code == 401
    assert resp.json() == {"msg": "User not exists"}


async def test_delete_user_cascades_to_profile_and_posts(client, register):
    headers, user = await register()
    other_headers, _ = await register(name="Bob")
    await client.post("/api/profile", json={"status": "Developer", "skills": "python"}, headers=headers)
    await client.post("/api/posts", json={"text": "first"}, headers=headers)
    await client.post("/api/posts", json={"text": "second"}, headers=headers)
    await client.post("/api/posts", json={"text": "keep me"}, headers=other_headers)

    resp = await client.delete("/api/auth", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["msg"] == "User removed"
    assert "password" not in resp.json()["user"]

    owner_id = PydanticObjectId(user["id"])
    assert await User.get(owner_id) is None
    assert await Profile.find(Profile.user == owner_id).count() == 0
    assert await Post.find(Post.user == owner_id).count() == 0
    assert await Post.find_all().count() == 1


async def test_delete_unknown_user_is_server_error(client, register):
    headers, _ = await register()
    await client.delete("/api/auth", headers=headers)
    resp = await client.delete("/api/auth", headers=headers)
    assert resp.status_code == 500
    assert resp.json() == {"msg": "Error: Cannot remove user."}


async def test_store_rejects_duplicate_email(store):
    repo = UserRepository()
    await repo.create("First", "same@example.com", "hash-1", "avatar")
    with pytest.raises(UserExists):
        await repo.create("Second", "same@example.com", "hash-2", "avatar")
    assert await User.find(User.email == "same@example.com").count() == 1


async def test_login_with_unknown_email_still_checks_a_hash(client):
    with patch("devconnector.services.auth_service.verify_password", AsyncMock(return_value=False)) as verify:
        resp = await client.post("/api/auth", json={"email": "ghost@example.com", "password": "pa55word"})
    assert resp.status_code == 400
    verify.assert_awaited_once_with("pa55word", None)


async def test_registration_keeps_event_loop_responsive(client):
    stalls = []
    done = asyncio.Event()

    async def ticker():
        last = time.perf_counter()
        while not done.is_set():
            await asyncio.sleep(0.01)
            now = time.perf_counter()
            stalls.append(now - last)
            last = now

    task = asyncio.create_task(ticker())
    with patch.object(security, "pwd_context", CryptContext(schemes=["bcrypt"], bcrypt__rounds=12)):
        resp = await client.post(
            "/api/users",
            json={"name": "Slow", "email": "slow@example.com", "password": "secret123"},
        )
    done.set()
    await task
    assert resp.status_code == 200
    assert max(stalls) < 0.2


@pytest.mark.parametrize("url", ["/api/auth", "/api/profile"])
async def test_account_delete_store_failure(client, register, url):
    headers, user = await register()
    with patch.object(UserRepository, "delete_cascade", AsyncMock(side_effect=PyMongoError("boom"))):
        resp = await client.delete(url, headers=headers)
    assert resp.status_code == 500
    assert resp.json() == {"msg": "Error: Cannot remove user."}
    assert await User.get(PydanticObjectId(user["id"])) is not None
