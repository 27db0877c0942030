# 재시도 로직 유틸리티
# 주니어 개발자님께: 컨테이너 환경에서는 API 서버가 MongoDB보다 먼저 뜨는 경우가 많습니다.
# 시작 시 연결(ping)만 몇 번 재시도하고, 요청 처리 중에는 재시도하지 않습니다.

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)
import logging
from typing import Type, Tuple

from pymongo.errors import ConnectionFailure

logger = logging.getLogger(__name__)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure,)
):
    """
    MongoDB 연결용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    1. max_attempts: 최대 시도 횟수 (처음 1번 + 재시도 max_attempts-1 번)
    2. initial_wait / max_wait: 지수 백오프 대기 시간의 하한/상한 (초)
    3. exceptions: 재시도할 예외 타입. ServerSelectionTimeoutError 는
       ConnectionFailure 의 하위 클래스라 기본값으로 함께 잡힙니다.

    모든 시도가 실패하면 마지막 예외를 그대로 다시 발생시킵니다 (reraise=True).

    사용 예시:
        @create_db_retry_decorator(max_attempts=5)
        async def ping(client):
            await client.admin.command("ping")
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=2,
            min=initial_wait,
            max=max_wait
        ),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
