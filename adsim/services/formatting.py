# adsim/services/formatting.py
# -----------------------------------------------------------------------------
# 표시용 포맷 (정수 단위 반올림, 천 단위 구분)
# - 엔진 결과는 그대로 두고 출력 직전에만 적용
# -----------------------------------------------------------------------------
from __future__ import annotations

import math
from typing import Sequence

import pandas as pd

from adsim.core.config import settings
from adsim.schemas.simulate import ProjectionRow

PROJECTION_COLUMNS = [
    "month",
    "adCost",
    "revenue",
    "profit",
    "cumulativeAdCost",
    "cumulativeRevenue",
    "cumulativeProfit",
]


def round_currency(value: float) -> int:
    # .5는 올림 (-2.5 -> -2). value + 0.5 는 0.49999999999999994 에서 1이 됨
    floor = math.floor(value)
    return floor + int(value - floor >= 0.5)


def format_currency(value: float, suffix: str | None = None) -> str:
    suffix = settings.CURRENCY_SUFFIX if suffix is None else suffix
    text = f"{round_currency(value):,}"
    return f"{text}{suffix}" if suffix else text


def projection_frame(rows: Sequence[ProjectionRow]) -> pd.DataFrame:
    """월별 예측 표. 금액 컬럼은 정수로 반올림."""
    records = [r.model_dump(by_alias=True) for r in rows]
    data: dict[str, pd.Series] = {
        "month": pd.Series([rec["month"] for rec in records], dtype="int64")
    }
    for col in PROJECTION_COLUMNS[1:]:
        # 장기 복리 금액은 int64 범위를 넘으므로 파이썬 int 그대로 보관
        data[col] = pd.Series(
            [round_currency(rec[col]) for rec in records], dtype=object
        )
    return pd.DataFrame(data, columns=PROJECTION_COLUMNS)
