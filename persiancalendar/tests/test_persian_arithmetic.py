# tests/test_persian_arithmetic.py
from __future__ import annotations

from persiancalendar.constants import const
from persiancalendar.models.gregorian import gregorian_to_jd, jd_to_gregorian
from persiancalendar.models.persian_arithmetic import ArithmeticPersianCalendar, leap_persian

CAL = ArithmeticPersianCalendar()


def test_cycle_has_683_leap_years():
    for first in (475, 1):
        years = range(first, first + const.CycleYears)
        assert sum(1 for y in years if leap_persian(y)) == const.CycleLeapYears


def test_cycle_length_in_days():
    assert CAL.to_jd(475 + 2820, 1, 1) - CAL.to_jd(475, 1, 1) == const.CycleDays


def test_leap_flag_matches_year_length():
    for year in range(1, 3300):
        length = CAL.to_jd(year + 1, 1, 1) - CAL.to_jd(year, 1, 1)
        assert length == (366 if CAL.is_leap(year) else 365), year


def test_known_leap_years():
    assert [y for y in range(1370, 1410) if leap_persian(y)] == [
        1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1404, 1408,
    ]


def test_known_dates(known_dates):
    for (py, pm, pd), (gy, gm, gd), _ in known_dates:
        jd = gregorian_to_jd(gy, gm, gd)
        assert CAL.from_jd(jd) == (py, pm, pd)
        assert CAL.to_jd(py, pm, pd) == jd


def test_epoch():
    assert CAL.to_jd(1, 1, 1) == const.PERSIAN_EPOCH
    assert CAL.from_jd(const.PERSIAN_EPOCH) == (1, 1, 1)


def test_round_trip_over_wide_range(rng):
    start = gregorian_to_jd(700, 1, 1)
    for offset in rng.integers(0, 2500 * 365, size=500):
        jd = start + int(offset)
        y, m, d = CAL.from_jd(jd)
        assert 1 <= m <= 12 and 1 <= d <= 31
        assert CAL.to_jd(y, m, d) == jd


def test_1404_starts_on_march_20():
    assert jd_to_gregorian(CAL.to_jd(1404, 1, 1)) == (2025, 3, 20)
