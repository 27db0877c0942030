# 사용자 저장소 레이어
# - 데이터 접근(조회/생성/수정/삭제)만 담당 (서비스 로직 분리)

from typing import Any, Dict, List, Optional
from beanie import PydanticObjectId
from bson.errors import InvalidId
from pydantic import EmailStr
from ..models.user import User
from ..schemas.user_schema import UserSummary

class UserRepository:
    async def list_summaries(self) -> List[UserSummary]:
        return await User.find_all().project(UserSummary).to_list()

    async def get_by_email(self, email: EmailStr) -> Optional[User]:
        return await User.find_one(User.email == email)

    async def get(self, user_id: str) -> Optional[User]:
        # 형식이 잘못된 id 는 "없는 사용자"로 취급
        try:
            oid = PydanticObjectId(user_id)
        except (InvalidId, TypeError):
            return None
        return await User.get(oid)

    async def create(self, name: str, email: EmailStr, hashed_password: str) -> User:
        user = User(name=name, email=email, hashed_password=hashed_password)
        return await user.insert()

    async def update(self, user: User, fields: Dict[str, Any]) -> User:
        if fields:
            await user.set(fields)
        return user

    async def delete(self, user: User) -> None:
        await user.delete()
