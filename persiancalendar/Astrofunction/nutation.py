# persiancalendar/Astrofunction/nutation.py
# License: GNU GPL v3
#黄経・傾斜角の章動（63 項）と平均黄道傾斜角
from __future__ import annotations

from typing import Tuple

import numpy as np

from persiancalendar.Astrofunction.fundarg import fundarg
from persiancalendar.Astrofunction.time_utils import julian_centuries
from persiancalendar.constants import const
from persiancalendar.data.coefficients import (
    NUTATION_ARG_COEFF,
    NUTATION_ARG_MULT,
    OBLIQUITY_EPOCH_DEG,
    OBLIQUITY_TERMS,
)


def nutation(jd: float) -> Tuple[float, float]:
    """
    Nutation in longitude and obliquity (IAU 1980, 63 terms).

    Parameters
    ----------
    jd : float
        Julian Ephemeris Day

    Returns
    -------
    (deltaPsi, deltaEpsilon) : degrees
    """
    t = julian_centuries(jd)
    ta = np.array(fundarg(t), dtype=float)

    # 各項の引数 = 整数係数 × 基本角
    ang = NUTATION_ARG_MULT @ ta
    to10 = t / 10.0

    dp = np.sum((NUTATION_ARG_COEFF[:, 0] + NUTATION_ARG_COEFF[:, 1] * to10) * np.sin(ang))
    de = np.sum((NUTATION_ARG_COEFF[:, 2] + NUTATION_ARG_COEFF[:, 3] * to10) * np.cos(ang))

    # 0.0001 arcsec -> deg
    return float(dp) / (3600.0 * 10000.0), float(de) / (3600.0 * 10000.0)


def obliqeq(jd: float) -> float:
    """
    Mean obliquity of the ecliptic [deg] (Laskar's 10th-degree series).

    U = T/100 (units of 10,000 Julian years). The series is only valid for
    |U| < 1; outside that span the epoch value is returned unchanged.
    """
    u = (jd - const.J2000) / (const.JulianCentury * 100.0)

    eps = OBLIQUITY_EPOCH_DEG
    if abs(u) < 1.0:
        v = u
        for term in OBLIQUITY_TERMS:
            eps += (term / 3600.0) * v
            v *= u
    return float(eps)


__all__ = ["nutation", "obliqeq"]
