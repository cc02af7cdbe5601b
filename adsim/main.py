# adsim/main.py
# -----------------------------------------------------------------------------
# FastAPI 엔트리포인트
# - 서버 기동 시 로깅 설정
# -----------------------------------------------------------------------------
from fastapi import FastAPI

from adsim.core.config import settings
from adsim.core.logging import setup_logging
from adsim.routers import simulate

app = FastAPI(title=settings.APP_NAME)


@app.on_event("startup")
async def on_startup():
    setup_logging()


app.include_router(simulate.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
