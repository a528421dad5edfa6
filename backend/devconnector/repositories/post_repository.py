# 게시글 저장소 레이어

from typing import List, Optional

from ..models.post import Post
from .user_repository import to_object_id


class PostRepository:
    async def create(self, post: Post) -> Post:
        return await post.insert()

    async def list_all(self) -> List[Post]:
        return await Post.find_all().sort(-Post.date, -Post.id).to_list()

    async def get(self, post_id: str) -> Optional[Post]:
        oid = to_object_id(post_id)
        if oid is None:
            return None
        return await Post.get(oid)

    async def list_by_user(self, user_id: str) -> List[Post]:
        oid = to_object_id(user_id)
        if oid is None:
            return []
        return await Post.find(Post.user == oid).to_list()

    async def save(self, post: Post) -> Post:
        # 문서 전체를 다시 씀 (read-modify-write, 낙관적 잠금 없음)
        return await post.save()

    async def delete(self, post: Post) -> None:
        await post.delete()
