import math
from typing import Sequence

from loguru import logger
from pydantic import BaseModel

from adsim.schemas.simulate import (
    AdSimResponse,
    InputSnapshot,
    ProjectionRow,
    SinglePeriodResult,
)
from adsim.services.formatting import format_currency
from adsim.services.projection import calculate_single_period, project_compound


class ProjectionOverflow(ValueError):
    """계산 결과가 float 범위를 벗어남 (inf/nan)"""


def ensure_finite(rows: Sequence[BaseModel]) -> None:
    for r in rows:
        bad = [k for k, v in r.model_dump().items() if not math.isfinite(v)]
        if bad:
            where = f" at month {r.month}" if isinstance(r, ProjectionRow) else ""
            logger.warning("non-finite values{}: {}", where, bad)
            raise ProjectionOverflow(
                f"values exceed the float range{where}: {', '.join(bad)}"
            )


def checked_projection(req: InputSnapshot) -> list[ProjectionRow]:
    rows = project_compound(req)
    ensure_finite(rows)
    return rows


def _explain(s: InputSnapshot, r: SinglePeriodResult) -> list[str]:
    lines = [
        f"광고비 {format_currency(s.ad_cost)} → 매출 {format_currency(r.revenue)} → "
        f"광고비 차감 전 이익 {format_currency(r.profit_before_ad_cost)}"
    ]
    if s.first_month_free:
        lines.append("첫 달 광고비 면제: 1개월차 월 이익과 순이익이 같습니다.")
    lines.append(
        "매월 광고비 차감 전 이익 전액을 다음 달 광고비로 재투자합니다 "
        "(이익이 0 이하이면 초기 광고비로 복귀)."
    )
    return lines


def simulate_ad(req: InputSnapshot) -> AdSimResponse:
    result = calculate_single_period(req)
    ensure_finite([result])
    return AdSimResponse(
        result=result,
        projection=checked_projection(req),
        explain=_explain(req, result),
    )
