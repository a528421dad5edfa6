# 프로필 스키마
# - skills는 "python, fastapi" 같은 쉼표 구분 문자열 또는 리스트 허용

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, field_validator

from .user_schema import NonEmptyStr

class ProfileUpsert(BaseModel):
    status: NonEmptyStr
    skills: Union[str, List[str]]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None

    @field_validator("skills")
    @classmethod
    def split_skills(cls, value: Union[str, List[str]]) -> List[str]:
        items = value.split(",") if isinstance(value, str) else value
        skills = [s.strip() for s in items if s and s.strip()]
        if not skills:
            raise ValueError("Skills is required")
        return skills

class ProfileOwner(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None

class ProfilePublic(BaseModel):
    id: str
    user: Optional[ProfileOwner] = None
    status: str
    skills: List[str]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    date: datetime
