# FastAPI 진입점
# - MongoStore(Beanie ODM) 초기화/종료 : lifespan
# - 라우터 라우팅 (/api/users, /api/auth, /api/profile, /api/posts)
# - CORS 설정, 예외 핸들러 등록

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.database import MongoStore
from .core.exceptions import register_exception_handlers
from .api.auth import router as auth_router
from .api.posts import router as posts_router
from .api.profile import router as profile_router
from .api.users import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[MongoStore] = None) -> FastAPI:
    store = store or MongoStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # MongoDB 연결 실패 시 서버를 띄우지 않음
        try:
            await store.open()
        except Exception as e:
            logger.error(f"[MongoDB] 연결 실패: {e}")
            raise
        logger.info(f"[Backend] {settings.APP_NAME} running on {settings.HOST}:{settings.PORT}")
        yield
        store.close()

    # FastAPI 애플리케이션 인스턴스 생성
    app = FastAPI(
        title="DevConnector API",
        description="개발자 소셜 네트워크 API (회원가입, 인증, 프로필, 게시글)",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # 간단한 헬스체크
    @app.get("/")
    async def root():
        return {"ok": True, "app": settings.APP_NAME, "time": datetime.utcnow().isoformat()}

    @app.get("/health")
    async def health_check(request: Request):
        if await request.app.state.store.ping():
            return {"status": "ok", "database": "connected"}
        return JSONResponse(status_code=503, content={"status": "error", "database": "unavailable"})

    app.include_router(users_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")
    app.include_router(profile_router, prefix="/api")
    app.include_router(posts_router, prefix="/api")
    return app


app = create_app()
