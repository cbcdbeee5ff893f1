# tests/test_model_agreement.py
# 天文モデルと 2820 年周期モデルの比較
from __future__ import annotations

from persiancalendar.models.persian_arithmetic import ArithmeticPersianCalendar
from persiancalendar.models.persian_astronomical import AstronomicalPersianCalendar

ASTRO = AstronomicalPersianCalendar()
ARITH = ArithmeticPersianCalendar()


def test_leap_disagreements_are_isolated():
    diff = {y for y in range(1280, 1411) if ASTRO.is_leap(y) != ARITH.is_leap(y)}
    assert diff <= {1308, 1309, 1341, 1342, 1403, 1404}
    # 1403 は天文モデルのみ閏年、1404 は算術モデルのみ閏年
    assert {1403, 1404} <= diff
    assert ASTRO.is_leap(1403) and not ARITH.is_leap(1403)
    assert ARITH.is_leap(1404) and not ASTRO.is_leap(1404)


def test_year_starts_agree_between_disagreements():
    for year in range(1343, 1404):
        assert ASTRO.to_jd(year, 1, 1) == ARITH.to_jd(year, 1, 1), year


def test_1404_starts_one_day_apart():
    assert ASTRO.to_jd(1404, 1, 1) - ARITH.to_jd(1404, 1, 1) == 1.0
