# Profile 모델
# - User와 1:1 관계 (user 필드에 사용자 id 저장)
# - 사용자 삭제 시 함께 삭제됨 (UserRepository.delete_cascade 참고)

from datetime import datetime
from typing import List, Optional

from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import ASCENDING, IndexModel

class Profile(Document):
    user: PydanticObjectId
    status: str
    skills: List[str] = Field(default_factory=list)
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    date: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "profiles"
        indexes = [IndexModel([("user", ASCENDING)], unique=True)]
