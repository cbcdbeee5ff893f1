# tests/test_persian_astronomical.py
from __future__ import annotations

import pytest

from persiancalendar.models.calendar_model import month_from_day_of_year, month_offset
from persiancalendar.models.gregorian import gregorian_to_jd, jd_to_gregorian
from persiancalendar.models.persian_astronomical import AstronomicalPersianCalendar

CAL = AstronomicalPersianCalendar()

LEAP_YEARS = (
    list(range(1280, 1309, 4))
    + list(range(1313, 1342, 4))
    + list(range(1346, 1371, 4))
    + list(range(1375, 1404, 4))
)
COMMON_YEARS = [1281, 1342, 1344, 1371, 1376]


def test_month_offsets():
    assert month_offset(1) == 0
    assert month_offset(7) == 186
    assert month_offset(8) == 216
    assert month_offset(12) == 336


@pytest.mark.parametrize(
    "yday,month",
    [(1, 1), (31, 1), (32, 2), (186, 6), (187, 7), (216, 7), (217, 8), (336, 11), (337, 12), (366, 12)],
)
def test_month_from_day_of_year(yday, month):
    assert month_from_day_of_year(yday) == month


def test_known_dates(known_dates):
    for (py, pm, pd), (gy, gm, gd), _ in known_dates:
        jd = gregorian_to_jd(gy, gm, gd)
        assert CAL.from_jd(jd) == (py, pm, pd)
        assert CAL.to_jd(py, pm, pd) == jd


def test_nowruz_dates():
    # 1398-01-01 = 2019-03-21, 1404-01-01 = 2025-03-21
    assert jd_to_gregorian(CAL.to_jd(1398, 1, 1)) == (2019, 3, 21)
    assert jd_to_gregorian(CAL.to_jd(1399, 1, 1)) == (2020, 3, 20)
    assert jd_to_gregorian(CAL.to_jd(1404, 1, 1)) == (2025, 3, 21)


@pytest.mark.parametrize("year", LEAP_YEARS)
def test_leap_years(year):
    assert CAL.is_leap(year)


@pytest.mark.parametrize("year", COMMON_YEARS)
def test_common_years(year):
    assert not CAL.is_leap(year)


def test_year_start_is_the_equinox_day():
    for year in (1300, 1357, 1398, 1420):
        eq = CAL.equinox_day(year)
        assert eq == int(eq)
        assert CAL.to_jd(year, 1, 1) == eq + 0.5
        found, located = CAL.year_and_equinox(eq + 0.5)
        assert (found, located) == (year, eq)


def test_esfand_boundaries():
    # 閏年 1399: 1399-12-30 の翌日が 1400-01-01
    last = CAL.to_jd(1399, 12, 30)
    assert CAL.from_jd(last) == (1399, 12, 30)
    assert CAL.from_jd(last + 1) == (1400, 1, 1)
    # 平年 1397: 12-29 の翌日が新年
    last = CAL.to_jd(1397, 12, 29)
    assert CAL.from_jd(last + 1) == (1398, 1, 1)


def test_half_year_boundary():
    jd = CAL.to_jd(1390, 6, 31)
    assert CAL.from_jd(jd) == (1390, 6, 31)
    assert CAL.from_jd(jd + 1) == (1390, 7, 1)


def test_search_converges_quickly(rng):
    start = gregorian_to_jd(1900, 1, 1)
    for offset in rng.integers(0, 200 * 365, size=60):
        _, _, steps = CAL.locate(start + int(offset))
        assert steps <= 3


def test_search_step_ceiling():
    cal = AstronomicalPersianCalendar(max_search_steps=1)
    # 年初より後の日付は 2 ステップ必要
    with pytest.raises(RuntimeError):
        cal.locate(gregorian_to_jd(2019, 6, 1))
    # 1 月は 1 ステップで足りる
    assert cal.locate(gregorian_to_jd(2019, 1, 15))[0] == 1397
    with pytest.raises(ValueError):
        AstronomicalPersianCalendar(max_search_steps=0)


def test_first_year():
    gy, gm, _ = jd_to_gregorian(CAL.to_jd(1, 1, 1))
    assert (gy, gm) == (622, 3)


def test_search_is_unbounded_by_default():
    assert CAL.max_search_steps is None
    # 10 万年先でも多項式のドリフトを一気に詰めるので数ステップで済む
    year, equinox, steps = CAL.locate(gregorian_to_jd(100000, 6, 1))
    assert equinox <= gregorian_to_jd(100000, 6, 1)
    assert steps <= 8
    assert isinstance(year, int)
