# MongoDB 연결 핸들
# - 앱 시작 시 open(), 종료 시 close() (main.py lifespan 참고)
# - 전역 상태 대신 create_app()에 명시적으로 전달

import logging
from typing import Any

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from .config import Settings
from ..models.post import Post
from ..models.profile import Profile
from ..models.user import User

logger = logging.getLogger(__name__)

DOCUMENT_MODELS = [User, Profile, Post]


class MongoStore:
    """Motor 클라이언트와 데이터베이스를 묶은 저장소 핸들.

    주니어 개발자님께: 테스트에서는 mongomock_motor의 클라이언트를
    그대로 넘겨서 실제 MongoDB 없이 동작시킬 수 있습니다.
    """

    def __init__(self, client: Any, database: Any):
        self.client = client
        self.database = database

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        # serverSelectionTimeoutMS: 5초 안에 서버를 찾지 못하면 타임아웃
        client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=5000)
        return cls(client, client.get_default_database())

    async def open(self) -> None:
        await init_beanie(database=self.database, document_models=DOCUMENT_MODELS)
        logger.info("[MongoDB] Beanie 초기화 완료")

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
        except Exception as e:
            logger.warning(f"[MongoDB] ping 실패: {e}")
            return False
        return True

    def close(self) -> None:
        self.client.close()
        logger.info("[MongoDB] 연결 종료")
