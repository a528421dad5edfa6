# 프로필 저장소 레이어

from typing import List, Optional

from ..models.profile import Profile
from .user_repository import to_object_id


class ProfileRepository:
    async def get_by_user(self, user_id: str) -> Optional[Profile]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        return await Profile.find_one(Profile.user == oid)

    async def list_all(self) -> List[Profile]:
        return await Profile.find_all().to_list()

    async def save(self, profile: Profile) -> Profile:
        return await profile.save()
