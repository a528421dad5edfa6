# 인증 라우터
# - 현재 사용자 조회: GET /api/auth
# - 로그인: POST /api/auth
# - 계정 삭제: DELETE /api/auth

from fastapi import APIRouter, Depends

from ..core.security import Identity, get_current_identity
from ..schemas.user_schema import AuthResponse, LoginRequest, UserPublic, UserRemoved
from ..services.auth_service import AuthService, get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])

@router.get("", response_model=UserPublic, summary="토큰으로 현재 사용자 조회 (비밀번호 제외)")
async def current_user(
    identity: Identity = Depends(get_current_identity),
    service: AuthService = Depends(get_auth_service),
):
    return await service.get_user(identity.id)

@router.post("", response_model=AuthResponse, summary="로그인 (JWT 토큰 발급)")
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return await service.login(payload.email, payload.password)

@router.delete("", response_model=UserRemoved, summary="계정 삭제 (프로필, 게시글 함께 삭제)")
async def delete_account(
    identity: Identity = Depends(get_current_identity),
    service: AuthService = Depends(get_auth_service),
):
    user = await service.delete_user(identity.id)
    return {"msg": "User removed", "user": user}
