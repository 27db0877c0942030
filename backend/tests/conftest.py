# 테스트 공용 픽스처
# - MongoDB 없이 돌리기 위해 UserRepository 를 메모리 구현으로 바꿔 끼웁니다
# - TestClient 는 with 블록 없이 사용 -> startup(DB 연결) 이벤트가 실행되지 않음

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from bson.errors import InvalidId
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.user_schema import UserSummary
from app.services.user_service import UserService, get_user_service


class InMemoryUserRepository:
    def __init__(self):
        self.users: Dict[ObjectId, SimpleNamespace] = {}

    async def list_summaries(self) -> List[UserSummary]:
        return [UserSummary(name=u.name, email=u.email) for u in self.users.values()]

    async def get_by_email(self, email: str) -> Optional[SimpleNamespace]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def get(self, user_id: str) -> Optional[SimpleNamespace]:
        try:
            return self.users.get(ObjectId(user_id))
        except (InvalidId, TypeError):
            return None

    async def create(self, name: str, email: str, hashed_password: str) -> SimpleNamespace:
        user = SimpleNamespace(id=ObjectId(), name=name, email=email, hashed_password=hashed_password)
        self.users[user.id] = user
        return user

    async def update(self, user: SimpleNamespace, fields: Dict[str, Any]) -> SimpleNamespace:
        for key, value in fields.items():
            setattr(user, key, value)
        return user

    async def delete(self, user: SimpleNamespace) -> None:
        del self.users[user.id]


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo):
    return UserService(repo)


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_user_service] = lambda: UserService(repo)
    yield TestClient(app)
    app.dependency_overrides.clear()
