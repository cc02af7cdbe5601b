# adsim/services/projection.py

from __future__ import annotations
from dataclasses import dataclass

from loguru import logger

from adsim.schemas.simulate import InputSnapshot, ProjectionRow, SinglePeriodResult


# ── 공통 유틸 ────────────────────────────────────────────────────────────────
def _ratio(numer: float, denom: float) -> float:
    # 분모가 0 이하이면 0 (오류/무한대 대신)
    return numer / denom if denom > 0 else 0.0


def _profit_split(revenue: float, s: InputSnapshot) -> tuple[float, float, float]:
    """매출 -> (이익액, 성과보수액, 광고비 차감 전 이익)"""
    profit_amount = revenue * s.profit_margin / 100
    affiliate_amount = profit_amount * s.affiliate_commission / 100
    return profit_amount, affiliate_amount, profit_amount - affiliate_amount


# ── 단월 지표 ────────────────────────────────────────────────────────────────
def calculate_single_period(s: InputSnapshot) -> SinglePeriodResult:
    revenue = s.ad_cost * s.roas / 100
    number_of_sales = _ratio(revenue, s.product_price)
    cpa = _ratio(s.ad_cost, number_of_sales)
    profit_amount, affiliate_amount, before_ad = _profit_split(revenue, s)
    profit = before_ad if s.first_month_free else before_ad - s.ad_cost

    return SinglePeriodResult(
        revenue=revenue,
        number_of_sales=number_of_sales,
        cpa=cpa,
        profit_before_ad_cost=before_ad,
        profit=profit,
        roas_actual=_ratio(revenue, s.ad_cost) * 100,
        seat_count=_ratio(s.ad_cost, s.seat_cpa),
        daily_cost=_ratio(s.ad_cost, s.operation_days),
        affiliate_amount=affiliate_amount,
        profit_amount=profit_amount,
    )


# ── 복리(재투자) 예측 ────────────────────────────────────────────────────────
@dataclass(slots=True)
class _Carry:
    ad_cost: float
    cumulative_ad_cost: float = 0.0
    cumulative_revenue: float = 0.0
    cumulative_profit: float = 0.0


def _advance(month: int, c: _Carry, s: InputSnapshot) -> ProjectionRow:
    """month >= 1 한 달을 진행하고 행을 반환. c는 다음 달 상태로 갱신된다."""
    revenue = c.ad_cost * s.roas / 100
    _, _, before_ad = _profit_split(revenue, s)

    waived = month == 1 and s.first_month_free
    net = before_ad if waived else before_ad - c.ad_cost

    if not waived:
        c.cumulative_ad_cost += c.ad_cost
    c.cumulative_revenue += revenue
    c.cumulative_profit += net

    row = ProjectionRow(
        month=month,
        ad_cost=c.ad_cost,
        revenue=revenue,
        profit=before_ad,
        cumulative_ad_cost=c.cumulative_ad_cost,
        cumulative_revenue=c.cumulative_revenue,
        cumulative_profit=c.cumulative_profit,
    )

    # 다음 달 광고비 = 이번 달 광고비 차감 전 이익, 적자면 초기 광고비로 복귀
    c.ad_cost = before_ad if before_ad > 0 else s.ad_cost
    return row


def project_compound(s: InputSnapshot) -> list[ProjectionRow]:
    """
    0..months 월별 행 목록. 0월은 초기값(광고비만 채움).
    호출마다 새 누적 상태를 사용하므로 같은 입력이면 항상 같은 결과.
    """
    c = _Carry(ad_cost=s.ad_cost)
    out: list[ProjectionRow] = []
    if s.months < 0:
        return out

    out.append(
        ProjectionRow(
            month=0,
            ad_cost=c.ad_cost,
            revenue=0.0,
            profit=0.0,
            cumulative_ad_cost=0.0,
            cumulative_revenue=0.0,
            cumulative_profit=0.0,
        )
    )
    for month in range(1, s.months + 1):
        out.append(_advance(month, c, s))

    logger.debug(
        "projection months={} final_cum_profit={}",
        s.months,
        c.cumulative_profit,
    )
    return out
