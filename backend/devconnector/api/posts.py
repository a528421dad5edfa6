# 게시글 라우터 (모두 로그인 필요)
# - POST   /api/posts                           : 작성
# - GET    /api/posts                           : 전체 목록 (최신순)
# - GET    /api/posts/{id}                      : 단건 조회
# - DELETE /api/posts/{id}                      : 삭제 (작성자만)
# - PUT    /api/posts/like/{id}                 : 좋아요
# - PUT    /api/posts/unlike/{id}               : 좋아요 취소
# - POST   /api/posts/comment/{id}              : 댓글 작성
# - DELETE /api/posts/comment/{id}/{comment_id} : 댓글 삭제 (댓글 작성자만)

from typing import List

from fastapi import APIRouter, Depends

from ..core.security import Identity, get_current_identity
from ..schemas.post_schema import CommentCreate, CommentPublic, LikePublic, PostCreate, PostPublic, PostRemoved
from ..services.post_service import PostService, get_post_service

router = APIRouter(prefix="/posts", tags=["posts"], dependencies=[Depends(get_current_identity)])

@router.post("", response_model=PostPublic, summary="게시글 작성")
async def create_post(
    payload: PostCreate,
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.create(identity.id, payload.text)

@router.get("", response_model=List[PostPublic], summary="게시글 목록 (최신순)")
async def list_posts(service: PostService = Depends(get_post_service)):
    return await service.list_posts()

@router.get("/{post_id}", response_model=PostPublic, summary="게시글 조회")
async def get_post(post_id: str, service: PostService = Depends(get_post_service)):
    return await service.get(post_id)

@router.delete("/{post_id}", response_model=PostRemoved, summary="게시글 삭제 (작성자만)")
async def delete_post(
    post_id: str,
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    post = await service.delete(identity.id, post_id)
    return {"msg": "Post removed", "post": post}

@router.put("/like/{post_id}", response_model=List[LikePublic], summary="좋아요")
async def like_post(
    post_id: str,
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.like(identity.id, post_id)

@router.put("/unlike/{post_id}", response_model=List[LikePublic], summary="좋아요 취소")
async def unlike_post(
    post_id: str,
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.unlike(identity.id, post_id)

@router.post("/comment/{post_id}", response_model=List[CommentPublic], summary="댓글 작성")
async def comment_post(
    post_id: str,
    payload: CommentCreate,
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.add_comment(identity.id, post_id, payload.text)

@router.delete("/comment/{post_id}/{comment_id}", response_model=List[CommentPublic], summary="댓글 삭제 (댓글 작성자만)")
async def delete_comment(
    post_id: str,
    comment_id: str,
    identity: Identity = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.delete_comment(identity.id, post_id, comment_id)
