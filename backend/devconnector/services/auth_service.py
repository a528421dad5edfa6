# 인증 서비스 레이어
# - 회원가입 (이메일 중복 체크, gravatar 아바타, 비밀번호 해싱)
# - 로그인 (비밀번호 검증, JWT 토큰 발급)
# - 현재 사용자 조회, 계정 삭제

import hashlib
import logging
from urllib.parse import urlencode

from fastapi import Depends
from pymongo.errors import PyMongoError

from ..core.config import settings
from ..core.exceptions import InvalidCredentials, ServerError, UserExists, UserNotFound
from ..core.security import create_access_token, get_password_hash, verify_password
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.user_schema import AuthResponse, UserPublic

logger = logging.getLogger(__name__)


def gravatar_url(email: str) -> str:
    """이메일로부터 항상 같은 gravatar 이미지 URL을 만듭니다."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({
        "s": settings.GRAVATAR_SIZE,
        "r": settings.GRAVATAR_RATING,
        "d": settings.GRAVATAR_DEFAULT,
    })
    return f"{settings.GRAVATAR_BASE_URL}/{digest}?{query}"


def user_to_public(user: User) -> UserPublic:
    return UserPublic(
        id=str(user.id),
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        date=user.date,
    )


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(token=create_access_token(str(user.id)), user=user_to_public(user))


async def delete_account(repo: UserRepository, user_id: str) -> User:
    """계정과 프로필, 게시글을 함께 삭제합니다. 실패하면 ServerError."""
    user = await repo.get(user_id)
    if not user:
        raise ServerError("Error: Cannot remove user.")
    try:
        await repo.delete_cascade(user)
    except PyMongoError as e:
        logger.error(f"[Auth] 사용자 삭제 실패 {user_id}: {e}", exc_info=True)
        raise ServerError("Error: Cannot remove user.")
    return user


class AuthService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, name: str, email: str, password: str) -> AuthResponse:
        existing = await self.repo.get_by_email(email)
        if existing:
            raise UserExists()
        hashed = await get_password_hash(password)
        user = await self.repo.create(name, email, hashed, gravatar_url(email))
        logger.info(f"[Auth] Register success: {user.id}")
        return _auth_response(user)

    async def login(self, email: str, password: str) -> AuthResponse:
        user = await self.repo.get_by_email(email)
        if not await verify_password(password, user.password if user else None):
            logger.info("[Auth] Login failed: invalid email or password")
            raise InvalidCredentials()
        logger.info(f"[Auth] Login success: {user.id}")
        return _auth_response(user)

    async def get_user(self, user_id: str) -> UserPublic:
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFound()
        return user_to_public(user)

    async def delete_user(self, user_id: str) -> UserPublic:
        return user_to_public(await delete_account(self.repo, user_id))


def get_auth_service(repo: UserRepository = Depends(UserRepository)) -> AuthService:
    return AuthService(repo)
