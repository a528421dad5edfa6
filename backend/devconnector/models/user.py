# User 도메인 모델 (Beanie Document)
# - 이름, 이메일, 비밀번호 해시, 아바타, 생성일
# - 이메일은 unique 인덱스

from datetime import datetime
from typing import Optional

from beanie import Document, Indexed
from pydantic import EmailStr, Field

class User(Document):
    name: str
    email: Indexed(EmailStr, unique=True)  # 중복 방지 인덱스
    password: str = Field(repr=False)  # 항상 bcrypt 해시
    avatar: Optional[str] = None
    date: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "users"  # 컬렉션명
