# adsim/core/config.py
# -----------------------------------------------------------------------------
# 전역 설정 관리 (pydantic-settings v2)
# - .env 파일과 OS 환경변수를 읽어 Settings 객체로 제공
# - 로그/시뮬레이션 한도/표시 단위를 한 곳에서 관리
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 기본
    APP_NAME: str = "AdSim"
    ENV: str = "dev"

    # 로깅
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "10 files"

    # 시뮬레이션 (API 경계에서만 적용, 엔진 자체는 제한 없음)
    MAX_PROJECTION_MONTHS: int = 600

    # 표시용 통화 접미사 (환율 변환 없음)
    CURRENCY_SUFFIX: str = "원"

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # .env에 추가 필드 무시
    )


settings = Settings()
