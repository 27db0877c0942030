# 로깅 설정
# - 루트 로거에 콘솔 핸들러 1개만 붙입니다
# - 각 모듈은 logging.getLogger(__name__) 으로 로거를 가져다 씁니다

import logging


def setup_logging(level: str = "INFO") -> None:
    """루트 로거를 설정합니다.

    이미 핸들러가 붙어 있으면 (uvicorn 재시작, 테스트에서 반복 import 등)
    아무것도 하지 않습니다. 알 수 없는 레벨 이름은 INFO 로 처리합니다.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
