# persiancalendar/Astrofunction/angles.py
# License: GNU GPL v3
#角度の変換・正規化と度数法の三角関数
from __future__ import annotations

import math


def mod(a: float, b: float) -> float:
    """Floored modulus: result has the sign of ``b``."""
    return a - b * math.floor(a / b)


def dtr(d: float) -> float:
    """deg -> rad"""
    return (d * math.pi) / 180.0


def rtd(r: float) -> float:
    """rad -> deg"""
    return (r * 180.0) / math.pi


def dsin(d: float) -> float:
    return math.sin(dtr(d))


def dcos(d: float) -> float:
    return math.cos(dtr(d))


def fixangle(a: float) -> float:
    """wrap to [0,360) degrees"""
    return a - 360.0 * math.floor(a / 360.0)


def fixangr(a: float) -> float:
    """wrap to [0,2π) radians"""
    return a - (2.0 * math.pi) * math.floor(a / (2.0 * math.pi))


__all__ = ["mod", "dtr", "rtd", "dsin", "dcos", "fixangle", "fixangr"]
