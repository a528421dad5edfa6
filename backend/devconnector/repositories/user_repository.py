# 사용자 저장소 레이어
# - 데이터 접근(조회/생성/삭제)만 담당 (서비스 로직 분리)
# - 삭제 시 Profile, Post를 먼저 지우고 User를 지움

import logging
from typing import List, Optional

from bson import ObjectId
from beanie import PydanticObjectId
from beanie.operators import In
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import UserExists
from ..models.post import Post
from ..models.profile import Profile
from ..models.user import User

logger = logging.getLogger(__name__)


def to_object_id(value: str) -> Optional[PydanticObjectId]:
    # 형식이 잘못된 id는 "없음"으로 취급
    if not ObjectId.is_valid(value):
        return None
    return PydanticObjectId(value)


class UserRepository:
    async def get_by_email(self, email: str) -> Optional[User]:
        return await User.find_one(User.email == email)

    async def create(self, name: str, email: str, hashed_password: str, avatar: str) -> User:
        user = User(name=name, email=email, password=hashed_password, avatar=avatar)
        try:
            return await user.insert()
        except DuplicateKeyError:
            # 동시에 같은 이메일로 가입한 경우 unique 인덱스가 막아줌
            raise UserExists()

    async def get(self, user_id: str) -> Optional[User]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        return await User.get(oid)

    async def get_many(self, user_ids: List[PydanticObjectId]) -> List[User]:
        if not user_ids:
            return []
        return await User.find(In(User.id, user_ids)).to_list()

    async def delete_cascade(self, user: User) -> None:
        await Profile.find(Profile.user == user.id).delete()
        await Post.find(Post.user == user.id).delete()
        await user.delete()
        logger.info(f"[Users] 사용자 {user.id} 및 관련 프로필/게시글 삭제")
