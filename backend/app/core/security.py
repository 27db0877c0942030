# 보안 유틸리티
# - 비밀번호 해싱/검증 (bcrypt)
# - 평문 비밀번호는 DB에 저장하지 않습니다
# - verify_password 는 저장된 해시 검증용 (현재 로그인 기능이 없어 테스트에서만 사용)

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
