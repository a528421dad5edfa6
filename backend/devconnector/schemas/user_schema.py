# 요청/응답 스키마 정의 (Pydantic 모델)
# - 응답용 UserPublic에는 password 필드가 없음

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, EmailStr, Field, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class UserCreate(BaseModel):
    name: NonEmptyStr
    email: EmailStr
    password: str = Field(..., min_length=6)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class UserPublic(BaseModel):
    id: str
    name: str
    email: EmailStr
    avatar: Optional[str] = None
    date: datetime

class AuthResponse(BaseModel):
    token: str
    user: UserPublic

class UserRemoved(BaseModel):
    msg: str
    user: UserPublic
