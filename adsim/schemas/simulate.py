# adsim/schemas/simulate.py
# -----------------------------------------------------------------------------
# 광고 운용 시뮬레이션 스키마
# - JSON 필드명은 camelCase, 입력 시 snake_case도 허용
# - 숫자로 해석할 수 없는 입력은 0으로 취급
# -----------------------------------------------------------------------------
import math
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from adsim.core.config import settings

_TRUE_STRINGS = {"true", "1", "on", "yes", "y"}


def to_number(value: Any) -> float:
    """숫자로 파싱, 실패/비유한 값은 0"""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(value, (int, float)):
        return bool(value) and math.isfinite(value)
    return False


class _Frozen(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class InputSnapshot(_Frozen):
    ad_cost: float = 500_000  # 광고 운용비
    product_price: float = 600_000  # 상품 단가
    roas: float = 300  # ROAS (%)
    conversion_rate: float = 20  # 성약률 (%), 계산에 미사용
    profit_margin: float = 60  # 이익률 (%)
    affiliate_commission: float = 20  # 성과 보수 (%)
    seat_cpa: float = 60_000  # 착석 CPA
    appointments: float = 8  # 약속 수, 계산에 미사용
    operation_days: float = 30  # 운용 일수(월)
    months: int = 12  # 시뮬레이션 기간(월)
    first_month_free: bool = True  # 첫 달 광고비 면제

    @field_validator(
        "ad_cost",
        "product_price",
        "roas",
        "conversion_rate",
        "profit_margin",
        "affiliate_commission",
        "seat_cpa",
        "appointments",
        "operation_days",
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, v: Any) -> float:
        return to_number(v)

    @field_validator("months", mode="before")
    @classmethod
    def _coerce_months(cls, v: Any) -> int:
        # 12.5 -> 12 (month <= 12.5 루프와 동일)
        return math.floor(to_number(v))

    @field_validator("first_month_free", mode="before")
    @classmethod
    def _coerce_flag(cls, v: Any) -> bool:
        return to_flag(v)


class AdSimRequest(InputSnapshot):
    @field_validator("months")
    @classmethod
    def _check_horizon(cls, v: int) -> int:
        if v < 0:
            raise ValueError("months must be >= 0")
        if v > settings.MAX_PROJECTION_MONTHS:
            raise ValueError(
                f"months must be <= {settings.MAX_PROJECTION_MONTHS}"
            )
        return v


class SinglePeriodResult(_Frozen):
    revenue: float
    number_of_sales: float
    cpa: float
    profit_before_ad_cost: float  # 광고비 차감 전 이익
    profit: float  # 순이익
    roas_actual: float
    seat_count: float
    daily_cost: float
    affiliate_amount: float
    profit_amount: float


class ProjectionRow(_Frozen):
    month: int
    ad_cost: float
    revenue: float
    profit: float  # 광고비 차감 전 월 이익
    cumulative_ad_cost: float
    cumulative_revenue: float
    cumulative_profit: float  # 광고비 차감 후 누적 순이익


class AdSimResponse(_Frozen):
    result: SinglePeriodResult
    projection: List[ProjectionRow]
    explain: List[str]
