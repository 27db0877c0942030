# 사용자 CRUD 라우터
# - GET    /users       : 전체 목록 (name, email 만)
# - POST   /users       : 생성 (이메일 중복 체크 포함)
# - PUT    /users/{id}  : 부분 수정 (이메일 변경 시 중복 재확인)
# - DELETE /users/{id}  : 삭제
#
# 서비스 예외(UserServiceError)는 그대로 올려 보내고, 그 외 예외는 여기서
# InternalError 로 바꿉니다. 응답 변환은 main.py 의 예외 핸들러가 담당합니다.

import logging

from fastapi import APIRouter, Depends, status

from ...core.exceptions import InternalError, UserServiceError
from ...schemas.user_schema import (
    MessageResponse,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from ...services.user_service import UserService, get_user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

_errors = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse, "description": "User not found / Email already registered"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse, "description": "Unexpected error"},
}


def _unexpected(exc: Exception) -> InternalError:
    logger.exception("Unexpected error while handling users request: %s", exc)
    return InternalError()


@router.get(
    "",
    response_model=UserListResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: _errors[status.HTTP_500_INTERNAL_SERVER_ERROR]},
    summary="전체 사용자 조회 (비밀번호 제외)",
)
async def list_users(service: UserService = Depends(get_user_service)):
    try:
        users = await service.list_users()
    except Exception as e:
        raise _unexpected(e) from e
    return {"ok": True, "users": users}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
    summary="사용자 생성 (이메일 중복 체크 포함)",
)
async def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    try:
        user = await service.create_user(payload)
    except UserServiceError:
        raise
    except Exception as e:
        raise _unexpected(e) from e
    return {"ok": True, "user": user}


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
    summary="사용자 수정 (보낸 필드만 반영)",
)
async def update_user(user_id: str, payload: UserUpdate, service: UserService = Depends(get_user_service)):
    try:
        user = await service.update_user(user_id, payload)
    except UserServiceError:
        raise
    except Exception as e:
        raise _unexpected(e) from e
    return {"ok": True, "user": user}


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses=_errors,
    summary="사용자 삭제",
)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    try:
        await service.delete_user(user_id)
    except UserServiceError:
        raise
    except Exception as e:
        raise _unexpected(e) from e
    return {"ok": True, "msg": "Successfully deleted"}
