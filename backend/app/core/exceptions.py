# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스 레이어는 HTTP를 모르고 이 예외들만 발생시킵니다.
# main.py 의 예외 핸들러가 {ok: false, msg} 응답으로 변환합니다.

from fastapi import status


class UserServiceError(Exception):
    """사용자 서비스 관련 기본 예외 클래스

    Attributes:
        status_code: 응답에 사용할 HTTP 상태 코드
        message: 클라이언트에 그대로 노출되는 메시지 (envelope 의 msg)
    """
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmailError(UserServiceError):
    """다른 사용자가 이미 같은 이메일을 사용 중일 때 발생"""
    message = "Email already registered"


class UserNotFoundError(UserServiceError):
    """id 로 사용자를 찾지 못했을 때 발생

    잘못된 형식의 ObjectId 도 여기에 포함됩니다.
    """
    message = "User not found"


class InternalError(UserServiceError):
    """예상하지 못한 DB/드라이버 오류. 원인 예외는 __cause__ 로 연결됩니다."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Unexpected error"
