# persiancalendar/Astrofunction/sun_position.py
# License: GNU GPL v3
#太陽の位置（低精度、Meeus ch. 25）
from __future__ import annotations

import math
from dataclasses import dataclass

from persiancalendar.Astrofunction.angles import dcos, dsin, fixangle, rtd
from persiancalendar.Astrofunction.nutation import obliqeq
from persiancalendar.Astrofunction.time_utils import julian_centuries


@dataclass(frozen=True)
class SunPosition:
    L0: float            # geometric mean longitude [deg]
    M: float             # mean anomaly [deg]
    e: float             # eccentricity of Earth's orbit
    C: float             # equation of center [deg]
    sunLong: float       # true longitude [deg]
    sunAnomaly: float    # true anomaly [deg]
    sunR: float          # radius vector [AU]
    Lambda: float        # apparent longitude [deg]
    Alpha: float         # true right ascension [deg]
    Delta: float         # true declination [deg]
    AlphaApp: float      # apparent right ascension [deg]
    DeltaApp: float      # apparent declination [deg]


def sunpos(jd: float) -> SunPosition:
    """
    Position of the Sun for a Julian Ephemeris Day.

    Parameters
    ----------
    jd : float
        Julian Ephemeris Day

    Returns
    -------
    SunPosition
    """
    T = julian_centuries(jd)
    T2 = T * T

    L0 = fixangle(280.46646 + 36000.76983 * T + 0.0003032 * T2)
    M = fixangle(357.52911 + 35999.05029 * T - 0.0001537 * T2)
    e = 0.016708634 - 0.000042037 * T - 0.0000001267 * T2
    C = (
        (1.914602 - 0.004817 * T - 0.000014 * T2) * dsin(M)
        + (0.019993 - 0.000101 * T) * dsin(2.0 * M)
        + 0.000289 * dsin(3.0 * M)
    )
    sunLong = L0 + C
    sunAnomaly = M + C
    sunR = (1.000001018 * (1.0 - e * e)) / (1.0 + e * dcos(sunAnomaly))

    # 見かけの黄経（章動・光行差の簡易補正）
    Omega = 125.04 - 1934.136 * T
    Lambda = sunLong - 0.00569 - 0.00478 * dsin(Omega)

    epsilon0 = obliqeq(jd)
    epsilon = epsilon0 + 0.00256 * dcos(Omega)

    Alpha = fixangle(rtd(math.atan2(dcos(epsilon0) * dsin(sunLong), dcos(sunLong))))
    Delta = rtd(math.asin(dsin(epsilon0) * dsin(sunLong)))
    AlphaApp = fixangle(rtd(math.atan2(dcos(epsilon) * dsin(Lambda), dcos(Lambda))))
    DeltaApp = rtd(math.asin(dsin(epsilon) * dsin(Lambda)))

    return SunPosition(
        L0=L0, M=M, e=e, C=C,
        sunLong=sunLong, sunAnomaly=sunAnomaly, sunR=sunR,
        Lambda=Lambda,
        Alpha=Alpha, Delta=Delta,
        AlphaApp=AlphaApp, DeltaApp=DeltaApp,
    )


__all__ = ["SunPosition", "sunpos"]
