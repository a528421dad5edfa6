# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/devconnector/core/config.py에 있으므로,
# 4단계 상위로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    APP_NAME: str = "devconnector"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # 데이터베이스 이름은 URI 경로에서 가져옵니다 (get_default_database)
    MONGODB_URI: str = "mongodb://localhost:27017/devconnector"

    JWT_SECRET_KEY: str = Field(..., description="JWT 토큰 서명에 사용되는 비밀키. 반드시 강력한 랜덤 문자열로 설정하세요.")
    JWT_ALGORITHM: str = "HS256"
    # 토큰 만료 시간 (초 단위). 기본값 24시간
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 86400
    # 클라이언트가 토큰을 실어 보내는 헤더 이름
    AUTH_TOKEN_HEADER: str = "x-auth-token"

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = 10

    GRAVATAR_BASE_URL: str = "https://www.gravatar.com/avatar"
    GRAVATAR_SIZE: str = "200"
    GRAVATAR_RATING: str = "pg"
    GRAVATAR_DEFAULT: str = "mm"

    CORS_ALLOW_ORIGINS: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


settings = Settings()
