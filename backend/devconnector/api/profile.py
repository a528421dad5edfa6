# 프로필 라우터
# - GET    /api/profile/me             : 내 프로필 (로그인 필요)
# - POST   /api/profile                : 프로필 생성/수정 (로그인 필요)
# - GET    /api/profile                : 전체 프로필
# - GET    /api/profile/user/{user_id} : 사용자별 프로필
# - DELETE /api/profile                : 계정 삭제 (로그인 필요)

from typing import List

from fastapi import APIRouter, Depends

from ..core.security import Identity, get_current_identity
from ..schemas.profile_schema import ProfilePublic, ProfileUpsert
from ..services.profile_service import ProfileService, get_profile_service

router = APIRouter(prefix="/profile", tags=["profile"])

@router.get("/me", response_model=ProfilePublic, summary="내 프로필 조회")
async def my_profile(
    identity: Identity = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    return await service.get_own(identity.id)

@router.post("", response_model=ProfilePublic, summary="프로필 생성/수정")
async def upsert_profile(
    payload: ProfileUpsert,
    identity: Identity = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    return await service.upsert(identity.id, payload)

@router.get("", response_model=List[ProfilePublic], summary="전체 프로필 조회")
async def list_profiles(service: ProfileService = Depends(get_profile_service)):
    return await service.list_profiles()

@router.get("/user/{user_id}", response_model=ProfilePublic, summary="사용자별 프로필 조회")
async def profile_by_user(user_id: str, service: ProfileService = Depends(get_profile_service)):
    return await service.get_by_user(user_id)

@router.delete("", summary="프로필 및 계정 삭제")
async def delete_profile(
    identity: Identity = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    await service.delete_account(identity.id)
    return {"msg": "User deleted"}
