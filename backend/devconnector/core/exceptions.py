# 커스텀 예외 클래스 정의
# 주니어 개발자님께: Python에서는 표준 예외(Exception)를 상속받아
# 프로젝트에 특화된 예외를 만들 수 있습니다.
# 각 예외는 HTTP 상태 코드와 응답 본문을 스스로 알고 있으므로,
# 서비스 레이어는 예외만 던지고 응답 변환은 핸들러가 담당합니다.

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class DevConnectorError(Exception):
    """모든 애플리케이션 예외의 기본 클래스

    주니어 개발자님께: status_code와 message는 하위 클래스에서 덮어씁니다.
    as_errors가 True이면 {"errors": [{"msg": ...}]} 형태로,
    False이면 {"msg": ...} 형태로 응답합니다.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server Error"
    as_errors: bool = False

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict:
        if self.as_errors:
            return {"errors": [{"msg": self.message}]}
        return {"msg": self.message}


class ValidationError(DevConnectorError):
    """잘못되거나 누락된 입력 (400)"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"
    as_errors = True


class InvalidCredentials(ValidationError):
    # 이메일이 없을 때와 비밀번호가 틀릴 때 같은 메시지를 사용합니다
    message = "Invalid credentials."


class AuthenticationError(DevConnectorError):
    """토큰이 없거나, 잘못되었거나, 만료된 경우 (401)"""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class MissingToken(AuthenticationError):
    message = "No token, authorization denied"


class InvalidToken(AuthenticationError):
    message = "Token is not valid"


class UserNotFound(AuthenticationError):
    message = "User not exists"


class AuthorizationError(DevConnectorError):
    """인증은 되었지만 권한이 없는 경우 (401)"""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "User not authorized"


class NotFoundError(DevConnectorError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class PostNotFound(NotFoundError):
    message = "Post not found"


class CommentNotFound(NotFoundError):
    message = "Comment does not exist"


class ProfileNotFound(NotFoundError):
    # 프로필 조회 실패는 400으로 응답합니다
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Profile not found"


class ConflictError(DevConnectorError):
    """중복 이메일, 중복 좋아요 등 (400)"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Conflict"


class UserExists(ConflictError):
    message = "User already exists"
    as_errors = True


class AlreadyLiked(ConflictError):
    message = "Post already liked"


class NotYetLiked(ConflictError):
    message = "Post has not yet been liked"


class ServerError(DevConnectorError):
    """예상하지 못한 저장소/내부 오류 (500)"""


# ---- 예외 핸들러 ----

async def handle_app_error(request: Request, exc: DevConnectorError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        errors.append({
            "msg": err.get("msg"),
            "param": loc[-1] if loc else None,
            "location": loc[0] if loc else None,
        })
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def handle_store_error(request: Request, exc: PyMongoError) -> JSONResponse:
    # 원인은 서버 로그에만 남기고 클라이언트에는 일반 오류만 전달
    logger.error(f"[MongoDB] {request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=ServerError().to_body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DevConnectorError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PyMongoError, handle_store_error)
