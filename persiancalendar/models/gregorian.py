# GNU GPL v3
from __future__ import annotations

import math
from typing import Tuple

from persiancalendar.Astrofunction.angles import mod
from persiancalendar.constants import const


def leap_gregorian(year: float) -> bool:
    """
    グレゴリオ暦のうるう年判定。
    400の倍数はうるう年、100の倍数は平年、4の倍数はうるう年。
    """
    return (year % 4 == 0) and not ((year % 100 == 0) and (year % 400 != 0))


def gregorian_to_jd(year: float, month: float, day: float) -> float:
    """
    Proleptic Gregorian calendar date -> Julian Day at civil midnight.

    Parameters
    ----------
    year, month, day : int or float
        Month and day may run past their usual ranges; the excess carries
        into the following months/years.

    Returns
    -------
    jd : float
        Julian Day ending in .5 (00:00 of that date).
    """
    return (
        (const.GREGORIAN_EPOCH - 1)
        + 365 * (year - 1)
        + math.floor((year - 1) / 4)
        - math.floor((year - 1) / 100)
        + math.floor((year - 1) / 400)
        + math.floor(
            (367 * month - 362) / 12
            + (0 if month <= 2 else (-1 if leap_gregorian(year) else -2))
            + day
        )
    )


def jd_to_gregorian(jd: float) -> Tuple[int, int, int]:
    """
    Julian Day -> proleptic Gregorian (year, month, day).

    年を 400/100/4/1 年ブロックに分解して求め、月は通日から、日は
    その月の 1 日の JD との差から求める。
    """
    wjd = math.floor(jd - 0.5) + 0.5
    depoch = wjd - const.GREGORIAN_EPOCH
    quadricent = math.floor(depoch / 146097)
    dqc = mod(depoch, 146097)
    cent = math.floor(dqc / 36524)
    dcent = mod(dqc, 36524)
    quad = math.floor(dcent / 1461)
    dquad = mod(dcent, 1461)
    yindex = math.floor(dquad / 365)
    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_jd(year, 1, 1)
    leapadj = 0 if wjd < gregorian_to_jd(year, 3, 1) else (1 if leap_gregorian(year) else 2)
    month = math.floor(((yearday + leapadj) * 12 + 373) / 367)
    day = (wjd - gregorian_to_jd(year, month, 1)) + 1

    return int(year), int(month), int(day)


__all__ = ["leap_gregorian", "gregorian_to_jd", "jd_to_gregorian"]
