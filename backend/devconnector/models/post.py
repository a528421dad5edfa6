# Post 모델
# - 작성자의 name/avatar는 작성 시점의 스냅샷 (User와 live join 하지 않음)
# - likes, comments는 문서 안에 내장된 배열 (최신 항목이 앞)

from datetime import datetime
from typing import List, Optional

from beanie import Document, PydanticObjectId
from pydantic import BaseModel, Field

class Like(BaseModel):
    user: PydanticObjectId

class Comment(BaseModel):
    id: PydanticObjectId = Field(default_factory=PydanticObjectId)
    user: PydanticObjectId
    text: str
    name: str
    avatar: Optional[str] = None
    date: datetime = Field(default_factory=datetime.utcnow)

class Post(Document):
    user: PydanticObjectId
    text: str
    name: str
    avatar: Optional[str] = None
    likes: List[Like] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)
    date: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "posts"
        indexes = ["user"]
