# FastAPI 진입점
# - Beanie ODM 초기화 (MongoDB)
# - 라우터 라우팅
# - CORS 설정
# - 예외 -> {ok: false, msg} envelope 변환
# - Swagger 문서는 /api-docs

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
import uvicorn

from .core.config import settings
from .core.exceptions import UserServiceError
from .core.logging_config import setup_logging
from .core.retry import create_db_retry_decorator
from .models.user import User
from .api.v1.users import router as users_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title=settings.DOCS_TITLE,
    description=settings.DOCS_DESCRIPTION,
    version=settings.APP_VERSION,
    contact={"name": settings.DOCS_CONTACT_NAME},
    servers=[{"url": f"http://localhost:{settings.PORT}"}],
    docs_url="/api-docs",
    redoc_url=None,
)

# CORS 허용 도메인 세팅
origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UserServiceError)
async def user_service_error_handler(request: Request, exc: UserServiceError):
    return JSONResponse(status_code=exc.status_code, content={"ok": False, "msg": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # 필수 필드 누락, 이메일 형식 오류 등. 첫 번째 오류만 메시지로 돌려줍니다.
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        msg = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        msg = "Invalid request"
    return JSONResponse(status_code=400, content={"ok": False, "msg": msg})


async def connect_db() -> None:
    # 주니어 개발자님께: AsyncIOMotorClient는 비동기 MongoDB 클라이언트입니다.
    # 실제 연결은 첫 명령(ping) 때 일어나므로 ping 만 재시도합니다.
    client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)

    @create_db_retry_decorator(max_attempts=settings.DB_CONNECT_ATTEMPTS)
    async def _ping():
        await client.admin.command("ping")

    await _ping()
    db = client.get_default_database()
    await init_beanie(database=db, document_models=[User])


# Beanie 초기화 (앱 시작 시 1회)
@app.on_event("startup")
async def app_init():
    try:
        await connect_db()
        logger.info("MongoDB 연결 성공: %s", settings.MONGODB_URI)
    except Exception as e:
        # MongoDB 연결 실패 시에도 서버는 시작됩니다 (/, /health, /api-docs 는 동작)
        logger.warning("MongoDB 연결 실패: %s", e)
        logger.warning("서버는 계속 시작됩니다. /users 요청은 500 Unexpected error 로 응답합니다.")
        logger.info("MongoDB URI를 확인하세요: %s", settings.MONGODB_URI)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Users CRUD"

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}

app.include_router(users_router)


def run() -> None:
    """uvicorn 으로 HOST:PORT 에서 서버를 띄웁니다 (console script: users-crud)."""
    logger.info("app listening on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
