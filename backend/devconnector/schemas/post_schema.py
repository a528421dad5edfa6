# 게시글/좋아요/댓글 스키마

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .user_schema import NonEmptyStr

class PostCreate(BaseModel):
    text: NonEmptyStr

class CommentCreate(BaseModel):
    text: NonEmptyStr

class LikePublic(BaseModel):
    user: str

class CommentPublic(BaseModel):
    id: str
    user: str
    text: str
    name: str
    avatar: Optional[str] = None
    date: datetime

class PostPublic(BaseModel):
    id: str
    user: str
    text: str
    name: str
    avatar: Optional[str] = None
    likes: List[LikePublic] = []
    comments: List[CommentPublic] = []
    date: datetime

class PostRemoved(BaseModel):
    msg: str
    post: PostPublic
