# License: GNU GPL v3
# ユリウス世紀・千年紀、ΔT（TT-UT）、JD からの曜日

from __future__ import annotations

import math

from persiancalendar.constants import const
from persiancalendar.data.coefficients import (
    DELTA_T_FIRST_YEAR,
    DELTA_T_LAST_YEAR,
    DELTA_T_STEP_YEARS,
    DELTA_T_TAB,
)


def julian_centuries(jd: float) -> float:
    """Julian centuries of TT from J2000.0"""
    return (jd - const.J2000) / const.JulianCentury


def julian_millennia(jd: float) -> float:
    """Julian millennia of TT from J2000.0"""
    return (jd - const.J2000) / const.JulianMillennium


def delta_t(year: float) -> float:
    """
    ΔT = TT - UT [s] for a (possibly fractional) year.

    Parameters
    ----------
    year : float

    Returns
    -------
    dt : float
        Seconds.

    Notes
    -----
    1620..2000 は 2 年刻みの表を線形補間。範囲外は多項式外挿
    （948 年より前は Morrison & Stephenson、以降は Meeus の式、
    2000..2100 には 0.37 (year - 2100) の補正を加える）。
    """
    if DELTA_T_FIRST_YEAR <= year <= DELTA_T_LAST_YEAR:
        pos = (year - DELTA_T_FIRST_YEAR) / DELTA_T_STEP_YEARS
        i = int(math.floor(pos))
        f = pos - i
        return float(DELTA_T_TAB[i] + (DELTA_T_TAB[i + 1] - DELTA_T_TAB[i]) * f)

    t = (year - 2000.0) / 100.0
    if year < 948:
        return 2177.0 + 497.0 * t + 44.1 * t * t

    dt = 102.0 + 102.0 * t + 25.3 * t * t
    if 2000 < year < 2100:
        dt += 0.37 * (year - 2100.0)
    return dt


def jwday(jd: float) -> int:
    """
    Day of week for a Julian Day.

    0 = Sunday (Yekshanbeh) ... 6 = Saturday (Shanbeh).
    ``floor(jd + 1.5) mod 7`` so that civil midnight (.5) and the whole
    civil day map to the same weekday.
    """
    return int(math.floor(jd + 1.5)) % 7


__all__ = ["julian_centuries", "julian_millennia", "delta_t", "jwday"]
