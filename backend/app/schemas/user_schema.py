# 요청/응답 스키마 정의 (Pydantic 모델)
# - 모든 응답은 {ok, ...} envelope 형태
# - 비밀번호(해시)는 어떤 응답 스키마에도 포함하지 않습니다

from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field

class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)

class UserUpdate(BaseModel):
    # 부분 수정: 보낸 필드만 반영 (model_dump(exclude_unset=True))
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)

class UserSummary(BaseModel):
    # 목록 조회용 projection (name, email 만)
    name: str
    email: str

class UserPublic(BaseModel):
    id: str
    name: str
    email: EmailStr

class UserListResponse(BaseModel):
    ok: bool = True
    users: List[UserSummary]

class UserResponse(BaseModel):
    ok: bool = True
    user: UserPublic

class MessageResponse(BaseModel):
    ok: bool
    msg: str
