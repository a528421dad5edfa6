# 보안/인증 유틸리티
# - 비밀번호 해싱/검증
# - JWT 토큰 생성/검증
# - 현재 사용자 식별(의존성) : 토큰만 검증하고 DB는 조회하지 않음

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from pydantic import BaseModel

from .config import settings
from .exceptions import InvalidToken, MissingToken

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)
token_header = APIKeyHeader(name=settings.AUTH_TOKEN_HEADER, auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


class Identity(BaseModel):
    """토큰에서 복원한 인증 주체"""
    id: str


# bcrypt는 CPU를 오래 쓰므로 스레드에서 실행 (이벤트 루프를 막지 않음)

def _verify_or_dummy(plain_password: str, hashed_password: Optional[str]) -> bool:
    if hashed_password is None:
        # 없는 계정도 같은 시간만큼 bcrypt를 돌려서 응답 시간으로 가입 여부를 알 수 없게 함
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)

async def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    return await asyncio.to_thread(_verify_or_dummy, plain_password, hashed_password)

async def get_password_hash(password: str) -> str:
    return await asyncio.to_thread(pwd_context.hash, password)

def create_token(subject: dict, expires_delta: timedelta) -> str:
    now = datetime.now(tz=timezone.utc)
    payload = {
        "exp": now + expires_delta,
        "iat": now,
        **subject,
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token

def create_access_token(user_id: str) -> str:
    return create_token({"user": {"id": str(user_id)}}, timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS))

def decode_access_token(token: str) -> str:
    """서명과 만료를 검증하고 토큰에 담긴 사용자 id를 반환합니다."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise InvalidToken()

    user = payload.get("user")
    if not isinstance(user, dict) or not user.get("id"):
        raise InvalidToken()
    return str(user["id"])

async def get_current_identity(
    request: Request,
    header_token: Optional[str] = Depends(token_header),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    # x-auth-token 헤더 우선, 없으면 Authorization: Bearer 사용
    token = header_token or (credentials.credentials if credentials else None)
    if not token:
        raise MissingToken()

    identity = Identity(id=decode_access_token(token))
    request.state.user = identity
    return identity
