# 실제 Beanie 저장소 테스트 (mongomock_motor 로 MongoDB 대체)
# - projection, 부분 수정(set), 삭제, 잘못된 id 처리를 UserRepository 그대로 검증
import asyncio

import pytest
from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient

from app.core.exceptions import DuplicateEmailError, UserNotFoundError
from app.core.security import verify_password
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user_schema import UserCreate, UserSummary, UserUpdate
from app.services.user_service import UserService


async def _service():
    client = AsyncMongoMockClient()
    await init_beanie(database=client["userscruddb_test"], document_models=[User])
    await User.delete_all()
    return UserService(UserRepository())


def test_create_and_list_projection():
    async def _run():
        service = await _service()
        await service.create_user(UserCreate(name="A", email="a@x.com", password="pw-a"))
        await service.create_user(UserCreate(name="B", email="b@x.com", password="pw-b"))
        return await service.list_users()

    users = asyncio.run(_run())
    assert users == [UserSummary(name="A", email="a@x.com"), UserSummary(name="B", email="b@x.com")]
    for user in users:
        assert set(user.model_dump()) == {"name", "email"}


def test_create_duplicate_email_keeps_one_record():
    async def _run():
        service = await _service()
        await service.create_user(UserCreate(name="A", email="a@x.com", password="pw"))
        with pytest.raises(DuplicateEmailError):
            await service.create_user(UserCreate(name="A2", email="a@x.com", password="pw"))
        return await User.find_all().to_list()

    stored = asyncio.run(_run())
    assert [u.name for u in stored] == ["A"]


def test_update_own_email_and_password_then_taken_email():
    async def _run():
        service = await _service()
        a = await service.create_user(UserCreate(name="A", email="a@x.com", password="pw-a"))
        await service.create_user(UserCreate(name="B", email="b@x.com", password="pw-b"))

        updated = await service.update_user(a.id, UserUpdate(name="A2", email="a@x.com", password="new-pw"))
        with pytest.raises(DuplicateEmailError):
            await service.update_user(a.id, UserUpdate(name="A3", email="b@x.com"))
        stored = await UserRepository().get(a.id)
        return updated, stored

    updated, stored = asyncio.run(_run())
    assert updated.name == "A2"
    assert updated.email == "a@x.com"
    assert stored.name == "A2"
    assert stored.email == "a@x.com"
    assert stored.hashed_password.startswith("$2b$")
    assert verify_password("new-pw", stored.hashed_password)


def test_delete_then_lookup_fails():
    async def _run():
        service = await _service()
        a = await service.create_user(UserCreate(name="A", email="a@x.com", password="pw"))
        b = await service.create_user(UserCreate(name="B", email="b@x.com", password="pw"))
        await service.delete_user(b.id)
        with pytest.raises(UserNotFoundError):
            await service.delete_user(b.id)
        return await service.list_users(), await UserRepository().get(b.id)

    remaining, missing = asyncio.run(_run())
    assert remaining == [UserSummary(name="A", email="a@x.com")]
    assert missing is None


@pytest.mark.parametrize("user_id", ["not-an-object-id", "123"])
def test_malformed_id_is_not_found(user_id):
    async def _run():
        service = await _service()
        assert await UserRepository().get(user_id) is None
        with pytest.raises(UserNotFoundError):
            await service.update_user(user_id, UserUpdate(name="x"))
        with pytest.raises(UserNotFoundError):
            await service.delete_user(user_id)

    asyncio.run(_run())
