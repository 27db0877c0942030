# 사용자 서비스 레이어
# - 이메일 중복 체크 후 생성
# - id 로 조회 후 부분 수정 (이메일이 바뀔 때만 중복 재확인)
# - id 로 조회 후 삭제

import logging
from typing import List

from fastapi import Depends
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import DuplicateEmailError, UserNotFoundError
from ..core.security import get_password_hash
from ..repositories.user_repository import UserRepository
from ..schemas.user_schema import UserCreate, UserPublic, UserSummary, UserUpdate

logger = logging.getLogger(__name__)


def to_public(user) -> UserPublic:
    return UserPublic(id=str(user.id), name=user.name, email=user.email)


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def list_users(self) -> List[UserSummary]:
        return await self.repo.list_summaries()

    async def create_user(self, payload: UserCreate) -> UserPublic:
        existing = await self.repo.get_by_email(payload.email)
        if existing:
            raise DuplicateEmailError()
        hashed = get_password_hash(payload.password)
        try:
            user = await self.repo.create(payload.name, payload.email, hashed)
        except DuplicateKeyError as e:
            # 동시 요청이 사전 체크를 통과한 경우 unique 인덱스가 막아줍니다
            raise DuplicateEmailError() from e
        logger.info("User created: id=%s", user.id)
        return to_public(user)

    async def update_user(self, user_id: str, payload: UserUpdate) -> UserPublic:
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError()

        fields = payload.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in fields:
            if fields["email"] == user.email:
                # 자기 자신의 이메일이면 수정 대상에서 제외
                del fields["email"]
            else:
                taken = await self.repo.get_by_email(fields["email"])
                if taken:
                    raise DuplicateEmailError()

        if "password" in fields:
            fields["hashed_password"] = get_password_hash(fields.pop("password"))

        try:
            user = await self.repo.update(user, fields)
        except DuplicateKeyError as e:
            raise DuplicateEmailError() from e
        logger.info("User updated: id=%s fields=%s", user.id, sorted(fields))
        return to_public(user)

    async def delete_user(self, user_id: str) -> None:
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError()
        await self.repo.delete(user)
        logger.info("User deleted: id=%s", user_id)


def get_user_service(repo: UserRepository = Depends(UserRepository)) -> UserService:
    return UserService(repo)
