# adsim/core/logging.py
# -----------------------------------------------------------------------------
# Loguru 기반 로깅 설정
# - 회전/백트레이스/레벨 지정
# - 파일 싱크 + stderr 싱크
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from adsim.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)


def setup_logging() -> None:
    LOG_DIR.mkdir(exist_ok=True, parents=True)

    logger.remove()  # 기본 핸들러 제거
    logger.add(sys.stderr, level=settings.LOG_LEVEL)
    logger.add(
        LOG_DIR / "app.log",
        rotation=settings.LOG_ROTATION,
        retention=settings.LOG_RETENTION,
        enqueue=True,  # 멀티프로세스 안전
        backtrace=True,
        diagnose=True,
        level=settings.LOG_LEVEL,
    )
