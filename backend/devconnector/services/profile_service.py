# 프로필 서비스 레이어
# - 내 프로필 조회, 생성/수정 (upsert)
# - 전체/사용자별 프로필 조회
# - 프로필 삭제 = 계정 삭제 (게시글, 프로필, 사용자 순서)

import logging
from typing import List

from beanie import PydanticObjectId
from fastapi import Depends

from ..core.exceptions import ProfileNotFound
from ..models.profile import Profile
from ..models.user import User
from ..repositories.profile_repository import ProfileRepository
from ..repositories.user_repository import UserRepository
from ..schemas.profile_schema import ProfileOwner, ProfilePublic, ProfileUpsert
from .auth_service import delete_account as delete_user_account

logger = logging.getLogger(__name__)


def profile_to_response(profile: Profile, owner: User = None) -> ProfilePublic:
    return ProfilePublic(
        id=str(profile.id),
        user=ProfileOwner(id=str(owner.id), name=owner.name, avatar=owner.avatar) if owner else None,
        status=profile.status,
        skills=profile.skills,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        githubusername=profile.githubusername,
        date=profile.date,
    )


class ProfileService:
    def __init__(self, profiles: ProfileRepository, users: UserRepository):
        self.profiles = profiles
        self.users = users

    async def get_own(self, user_id: str) -> ProfilePublic:
        profile = await self.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFound("There is no profile for this user")
        return profile_to_response(profile, await self.users.get(user_id))

    async def upsert(self, user_id: str, data: ProfileUpsert) -> ProfilePublic:
        fields = data.model_dump()
        profile = await self.profiles.get_by_user(user_id)
        if profile:
            for key, value in fields.items():
                setattr(profile, key, value)
        else:
            profile = Profile(user=PydanticObjectId(user_id), **fields)
        profile = await self.profiles.save(profile)
        logger.info(f"[Profile] 프로필 저장: user={user_id}")
        return profile_to_response(profile, await self.users.get(user_id))

    async def list_profiles(self) -> List[ProfilePublic]:
        profiles = await self.profiles.list_all()
        users = await self.users.get_many([p.user for p in profiles])
        owners = {u.id: u for u in users}
        return [profile_to_response(p, owners.get(p.user)) for p in profiles]

    async def get_by_user(self, user_id: str) -> ProfilePublic:
        profile = await self.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFound()
        return profile_to_response(profile, await self.users.get(user_id))

    async def delete_account(self, user_id: str) -> None:
        await delete_user_account(self.users, user_id)


def get_profile_service(
    profiles: ProfileRepository = Depends(ProfileRepository),
    users: UserRepository = Depends(UserRepository),
) -> ProfileService:
    return ProfileService(profiles, users)
