# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬(docker-compose) 실행 편의성 확보

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/app/core/config.py에 있으므로,
# 4단계 상위로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "users-crud"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8081

    # docker-compose 의 mongo 서비스 주소
    MONGODB_URI: str = "mongodb://mongo:27017/userscruddb"
    MONGODB_TIMEOUT_MS: int = Field(default=5000, description="서버 선택 타임아웃(밀리초)")
    DB_CONNECT_ATTEMPTS: int = Field(default=3, ge=1, description="시작 시 MongoDB ping 최대 시도 횟수")

    CORS_ALLOW_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # Swagger(/api-docs) 문서 정보
    DOCS_TITLE: str = "UsersCRUD API"
    DOCS_DESCRIPTION: str = "Users CRUD Class"
    DOCS_CONTACT_NAME: str = "mateocm96"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
