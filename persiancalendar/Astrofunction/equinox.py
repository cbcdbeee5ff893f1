# persiancalendar/Astrofunction/equinox.py
# License: GNU GPL v3
#春分点（分点・至点）の時刻と、テヘラン地方時への変換
from __future__ import annotations

import math

import numpy as np

from persiancalendar.Astrofunction.angles import dcos, fixangle
from persiancalendar.Astrofunction.nutation import nutation, obliqeq
from persiancalendar.Astrofunction.sun_position import sunpos
from persiancalendar.Astrofunction.time_utils import delta_t, julian_centuries, julian_millennia
from persiancalendar.constants import const
from persiancalendar.data.coefficients import (
    EQUINOX_PERIODIC_TERMS,
    JDE0_TAB_1000,
    JDE0_TAB_2000,
)

MARCH_EQUINOX = 0
JUNE_SOLSTICE = 1
SEPTEMBER_EQUINOX = 2
DECEMBER_SOLSTICE = 3


def equinox(year: float, which: int = MARCH_EQUINOX) -> float:
    """
    Julian Ephemeris Day of an equinox or solstice (Meeus ch. 27).

    Parameters
    ----------
    year : float
        Gregorian year.
    which : {0, 1, 2, 3}
        0: March equinox, 1: June solstice, 2: September equinox, 3: December solstice.

    Returns
    -------
    JDE : float
        Dynamical time (TT).
    """
    if which not in (MARCH_EQUINOX, JUNE_SOLSTICE, SEPTEMBER_EQUINOX, DECEMBER_SOLSTICE):
        raise ValueError(f"which must be 0..3 (got {which})")

    # 1000 年を境に多項式を切り替える
    if year < 1000:
        tab = JDE0_TAB_1000
        Y = year / 1000.0
    else:
        tab = JDE0_TAB_2000
        Y = (year - 2000.0) / 1000.0

    a, b, c, d, e = tab[which]
    JDE0 = a + b * Y + c * Y * Y + d * Y * Y * Y + e * Y * Y * Y * Y

    T = julian_centuries(JDE0)
    W = 35999.373 * T - 2.47
    deltaL = 1.0 + 0.0334 * dcos(W) + 0.0007 * dcos(2.0 * W)

    amp = EQUINOX_PERIODIC_TERMS[:, 0]
    phase = EQUINOX_PERIODIC_TERMS[:, 1] + EQUINOX_PERIODIC_TERMS[:, 2] * T
    S = float(np.sum(amp * np.cos(phase * np.pi / 180.0)))

    return float(JDE0 + (S * 0.00001) / deltaL)


def equation_of_time(jd: float) -> float:
    """
    Equation of time for a Julian Ephemeris Day, as a fraction of a day.

    Apparent solar time minus mean solar time, folded into [0, 20) before
    scaling to days.
    """
    tau = julian_millennia(jd)
    L0 = (
        280.4664567
        + 360007.6982779 * tau
        + 0.03032028 * tau * tau
        + (tau * tau * tau) / 49931.0
        - (tau * tau * tau * tau) / 15300.0
        - (tau * tau * tau * tau * tau) / 2000000.0
    )
    L0 = fixangle(L0)

    alpha = sunpos(jd).AlphaApp
    deltaPsi, deltaEpsilon = nutation(jd)
    epsilon = obliqeq(jd) + deltaEpsilon

    E = L0 - 0.0057183 - alpha + deltaPsi * dcos(epsilon)
    E = E - 20.0 * math.floor(E / 20.0)
    return E / (24.0 * 60.0)


def tehran_equinox(year: float) -> float:
    """
    Instant of the March equinox in Tehran local mean time (JD, fractional).

    TT -> UT (ΔT), apparent -> mean solar time (equation of time),
    Greenwich -> 52.5°E meridian.
    """
    equJED = equinox(year, MARCH_EQUINOX)
    equJD = equJED - delta_t(year) / const.SecondsPerDay
    equAPP = equJD + equation_of_time(equJED)
    dtTehran = const.TehranLongitude / 360.0
    return equAPP + dtTehran


def tehran_equinox_jd(year: float) -> float:
    """
    Civil day (integer JD) on which the March equinox of ``year`` falls in Tehran.

    This floored value, not the fractional instant, is what starts the
    Persian year.
    """
    return float(math.floor(tehran_equinox(year)))


__all__ = [
    "MARCH_EQUINOX",
    "JUNE_SOLSTICE",
    "SEPTEMBER_EQUINOX",
    "DECEMBER_SOLSTICE",
    "equinox",
    "equation_of_time",
    "tehran_equinox",
    "tehran_equinox_jd",
]
