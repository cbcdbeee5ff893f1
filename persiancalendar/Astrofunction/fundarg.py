# License: GNU GPL v3
#章動計算の基本角（fundamental arguments）
#ユリウス世紀 ttt を入力として、Delaunay 引数 D, M, M', F, Ω を計算し、[0, 2π) のラジアンで返す。
from __future__ import annotations

from typing import Tuple

from persiancalendar.Astrofunction.angles import dtr, fixangr


def fundarg(ttt: float) -> Tuple[float, float, float, float, float]:
    """
    Fundamental arguments for the IAU 1980 nutation series (Meeus ch. 22).

    Parameters
    ----------
    ttt : float
        Julian centuries of TT from J2000.0

    Returns
    -------
    d, m, mprime, f, omega : radians, wrapped to [0, 2π)
        d      : mean elongation of the Moon from the Sun
        m      : mean anomaly of the Sun
        mprime : mean anomaly of the Moon
        f      : Moon's argument of latitude
        omega  : longitude of the ascending node of the Moon's mean orbit
    """
    t2 = ttt * ttt
    t3 = t2 * ttt

    # deg
    d      = 297.850363 + 445267.11148  * ttt - 0.0019142 * t2 + t3 / 189474.0
    m      = 357.52772  +  35999.05034  * ttt - 0.0001603 * t2 - t3 / 300000.0
    mprime = 134.96298  + 477198.867398 * ttt + 0.0086972 * t2 + t3 / 56250.0
    f      =  93.27191  + 483202.017538 * ttt - 0.0036825 * t2 + t3 / 327270.0
    omega  = 125.04452  -   1934.136261 * ttt + 0.0020708 * t2 + t3 / 450000.0

    # deg -> rad, then wrap
    return tuple(fixangr(dtr(v)) for v in (d, m, mprime, f, omega))  # type: ignore[return-value]


__all__ = ["fundarg"]
