# adsim/routers/simulate.py
# -----------------------------------------------------------------------------
# /simulate                 : 단월 지표 + 월별 복리 예측
# /simulate/defaults        : 계산기 초기 입력값
# /simulate/projection.csv  : 월별 예측 표 CSV
# -----------------------------------------------------------------------------
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from loguru import logger

from adsim.schemas.simulate import AdSimRequest, AdSimResponse, InputSnapshot
from adsim.services.formatting import projection_frame
from adsim.services.simulate import ProjectionOverflow, checked_projection, simulate_ad

router = APIRouter(prefix="/simulate", tags=["simulate"])


@router.get("/defaults", response_model=InputSnapshot)
async def defaults():
    return InputSnapshot()


@router.post("", response_model=AdSimResponse)
async def simulate(req: AdSimRequest):
    logger.info(
        "simulate months={} first_month_free={}", req.months, req.first_month_free
    )
    try:
        return simulate_ad(req)
    except ProjectionOverflow as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("simulate failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/projection.csv")
async def projection_csv(req: AdSimRequest):
    logger.info("projection csv months={}", req.months)
    try:
        df = projection_frame(checked_projection(req))
    except ProjectionOverflow as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("projection csv failed")
        raise HTTPException(status_code=500, detail=str(e))
    return Response(
        content=df.to_csv(index=False),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="projection.csv"'},
    )
