# 회원가입 라우터
# - POST /api/users

from fastapi import APIRouter, Depends

from ..schemas.user_schema import AuthResponse, UserCreate
from ..services.auth_service import AuthService, get_auth_service

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=AuthResponse, summary="회원가입 (이메일 중복 체크 포함)")
async def register(payload: UserCreate, service: AuthService = Depends(get_auth_service)):
    return await service.register(payload.name, payload.email, payload.password)
