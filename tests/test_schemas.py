"""Tests for input snapshot coercion."""

import pytest
from pydantic import ValidationError

from adsim.core.config import settings
from adsim.schemas.simulate import AdSimRequest, InputSnapshot


@pytest.mark.parametrize("raw", ["", "abc", None, "1,000", [], {}])
def test_non_numeric_input_becomes_zero(raw) -> None:
    snap = InputSnapshot(adCost=raw, roas=raw)

    assert snap.ad_cost == 0
    assert snap.roas == 0


def test_numeric_strings_are_parsed() -> None:
    snap = InputSnapshot(adCost=" 250000 ", profitMargin="45.5")

    assert snap.ad_cost == 250_000
    assert snap.profit_margin == 45.5


def test_months_is_floored() -> None:
    assert InputSnapshot(months="12.9").months == 12
    assert InputSnapshot(months="x").months == 0
    assert InputSnapshot(months=-0.5).months == -1


@pytest.mark.parametrize(
    "raw, expected",
    [(True, True), (False, False), ("true", True), ("on", True), ("off", False),
     ("junk", False), (1, True), (0, False), (None, False)],
)
def test_first_month_free_flag(raw, expected) -> None:
    assert InputSnapshot(firstMonthFree=raw).first_month_free is expected


def test_snake_case_names_accepted() -> None:
    snap = InputSnapshot(ad_cost=1, seat_cpa=2)

    assert snap.ad_cost == 1
    assert snap.seat_cpa == 2


def test_snapshot_is_frozen(default_snapshot: InputSnapshot) -> None:
    with pytest.raises(ValidationError):
        default_snapshot.ad_cost = 1


def test_request_rejects_horizon_above_limit() -> None:
    with pytest.raises(ValidationError):
        AdSimRequest(months=settings.MAX_PROJECTION_MONTHS + 1)

    assert AdSimRequest(months=settings.MAX_PROJECTION_MONTHS).months == (
        settings.MAX_PROJECTION_MONTHS
    )
