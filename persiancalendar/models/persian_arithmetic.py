# GNU GPL v3
from __future__ import annotations

import math
from typing import Tuple

from persiancalendar.Astrofunction.angles import mod
from persiancalendar.constants import const
from persiancalendar.models.calendar_model import month_from_day_of_year, month_offset


def leap_persian(year: float) -> bool:
    """
    2820 年周期（683 閏年）による閏年判定。

    Notes
    -----
    ``mod`` は床関数による剰余。474 年より前の年でも to_jd の年長と一致する。
    """
    base = year - (const.CycleBaseYear if year > 0 else const.CycleBaseYear - 1)
    return (((mod(base, const.CycleYears) + const.CycleBaseYear) + 38) * 682) % 2816 < 682


class ArithmeticPersianCalendar:
    """
    Solar Hijri calendar computed from the 2820-year grand cycle
    (2137 common years, 683 leap years, 1,029,983 days).

    Closed form in both directions; agrees with the astronomical model for
    most years but not all of them (e.g. 1403 / 1404).
    """

    name = "arithmetic"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def to_jd(self, year: float, month: float, day: float) -> float:
        """Persian (year, month, day) -> Julian Day at civil midnight."""
        epbase = year - (const.CycleBaseYear if year >= 0 else const.CycleBaseYear - 1)
        epyear = const.CycleBaseYear + mod(epbase, const.CycleYears)

        return (
            day
            + month_offset(month)
            + math.floor((epyear * 682 - 110) / 2816)
            + (epyear - 1) * 365
            + math.floor(epbase / const.CycleYears) * const.CycleDays
            + (const.PERSIAN_EPOCH - 1)
        )

    def from_jd(self, jd: float) -> Tuple[int, int, int]:
        """Julian Day -> Persian (year, month, day)."""
        jd = math.floor(jd) + 0.5

        depoch = jd - self.to_jd(475, 1, 1)
        cycle = math.floor(depoch / const.CycleDays)
        cyear = mod(depoch, const.CycleDays)
        if cyear == const.CycleDays - 1:
            ycycle = const.CycleYears
        else:
            aux1 = math.floor(cyear / 366)
            aux2 = mod(cyear, 366)
            ycycle = math.floor((2134 * aux1 + 2816 * aux2 + 2815) / 1028522) + aux1 + 1

        year = ycycle + const.CycleYears * cycle + const.CycleBaseYear
        if year <= 0:
            year -= 1  # 0 年は存在しない

        yday = (jd - self.to_jd(year, 1, 1)) + 1
        month = month_from_day_of_year(yday)
        day = (jd - self.to_jd(year, month, 1)) + 1
        return int(year), int(month), int(day)

    def is_leap(self, year: float) -> bool:
        return leap_persian(year)


__all__ = ["leap_persian", "ArithmeticPersianCalendar"]
