# 게시글 서비스 레이어
# - 작성/조회/삭제
# - 좋아요/좋아요 취소, 댓글 작성/삭제
#
# 주의: likes/comments 변경은 문서 단위 read-modify-write 입니다.
# 같은 게시글에 동시에 좋아요가 들어오면 한쪽 변경이 유실될 수 있습니다.

import logging
from typing import List

from beanie import PydanticObjectId
from fastapi import Depends

from ..core.exceptions import (
    AlreadyLiked,
    AuthorizationError,
    CommentNotFound,
    NotYetLiked,
    PostNotFound,
    UserNotFound,
)
from ..models.post import Comment, Like, Post
from ..models.user import User
from ..repositories.post_repository import PostRepository
from ..repositories.user_repository import UserRepository
from ..schemas.post_schema import CommentPublic, LikePublic, PostPublic

logger = logging.getLogger(__name__)


def likes_to_response(post: Post) -> List[LikePublic]:
    return [LikePublic(user=str(like.user)) for like in post.likes]


def comments_to_response(post: Post) -> List[CommentPublic]:
    return [
        CommentPublic(
            id=str(c.id),
            user=str(c.user),
            text=c.text,
            name=c.name,
            avatar=c.avatar,
            date=c.date,
        )
        for c in post.comments
    ]


def post_to_response(post: Post) -> PostPublic:
    return PostPublic(
        id=str(post.id),
        user=str(post.user),
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=likes_to_response(post),
        comments=comments_to_response(post),
        date=post.date,
    )


class PostService:
    def __init__(self, posts: PostRepository, users: UserRepository):
        self.posts = posts
        self.users = users

    async def _load_user(self, user_id: str) -> User:
        user = await self.users.get(user_id)
        if not user:
            raise UserNotFound()
        return user

    async def _load_post(self, post_id: str) -> Post:
        post = await self.posts.get(post_id)
        if not post:
            raise PostNotFound()
        return post

    async def create(self, user_id: str, text: str) -> PostPublic:
        author = await self._load_user(user_id)
        # name/avatar는 작성 시점 값으로 고정
        post = Post(user=author.id, text=text, name=author.name, avatar=author.avatar)
        post = await self.posts.create(post)
        logger.info(f"[Posts] 게시글 작성: post={post.id} user={user_id}")
        return post_to_response(post)

    async def list_posts(self) -> List[PostPublic]:
        posts = await self.posts.list_all()
        return [post_to_response(p) for p in posts]

    async def get(self, post_id: str) -> PostPublic:
        return post_to_response(await self._load_post(post_id))

    async def delete(self, user_id: str, post_id: str) -> PostPublic:
        post = await self._load_post(post_id)
        if str(post.user) != user_id:
            raise AuthorizationError()
        await self.posts.delete(post)
        logger.info(f"[Posts] 게시글 삭제: post={post_id} user={user_id}")
        return post_to_response(post)

    async def like(self, user_id: str, post_id: str) -> List[LikePublic]:
        post = await self._load_post(post_id)
        await self._load_user(user_id)
        if any(str(like.user) == user_id for like in post.likes):
            raise AlreadyLiked()
        post.likes.insert(0, Like(user=PydanticObjectId(user_id)))
        await self.posts.save(post)
        return likes_to_response(post)

    async def unlike(self, user_id: str, post_id: str) -> List[LikePublic]:
        post = await self._load_post(post_id)
        await self._load_user(user_id)
        liked_by = [str(like.user) for like in post.likes]
        if user_id not in liked_by:
            raise NotYetLiked()
        del post.likes[liked_by.index(user_id)]
        await self.posts.save(post)
        return likes_to_response(post)

    async def add_comment(self, user_id: str, post_id: str, text: str) -> List[CommentPublic]:
        post = await self._load_post(post_id)
        author = await self._load_user(user_id)
        comment = Comment(user=author.id, text=text, name=author.name, avatar=author.avatar)
        post.comments.insert(0, comment)
        await self.posts.save(post)
        return comments_to_response(post)

    async def delete_comment(self, user_id: str, post_id: str, comment_id: str) -> List[CommentPublic]:
        post = await self._load_post(post_id)
        index = next((i for i, c in enumerate(post.comments) if str(c.id) == comment_id), None)
        if index is None:
            raise CommentNotFound()
        if str(post.comments[index].user) != user_id:
            raise AuthorizationError()
        # 요청자의 다른 댓글이 아니라, 찾은 그 댓글을 지움
        del post.comments[index]
        await self.posts.save(post)
        return comments_to_response(post)


def get_post_service(
    posts: PostRepository = Depends(PostRepository),
    users: UserRepository = Depends(UserRepository),
) -> PostService:
    return PostService(posts, users)
