# User 도메인 모델 (Beanie Document)
# - 이름, 이메일, 비밀번호 해시, 생성일
# - 이메일은 unique 인덱스 (서비스 레이어의 중복 체크를 뒷받침)

from datetime import datetime, timezone
from beanie import Document, Indexed
from pydantic import EmailStr, Field

class User(Document):
    name: str
    email: Indexed(EmailStr, unique=True)  # 중복 방지 인덱스
    hashed_password: str = Field(repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "users"  # 컬렉션명
