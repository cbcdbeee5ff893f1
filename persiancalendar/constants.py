# persiancalendar/constants.py
# License: GNU GPL v3
# 暦計算で共通に使う定数（エポック・年の長さ・テヘラン子午線）
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _CalendarConst:
    # 時刻系
    J2000: float = 2451545.0                 # JD of 2000-01-01 12:00 TT
    JulianCentury: float = 36525.0           # days
    JulianMillennium: float = 365250.0       # days
    SecondsPerDay: float = 86400.0

    # 暦のエポック（JD, 深夜 = .5）
    GREGORIAN_EPOCH: float = 1721425.5       # 0001-01-01 (proleptic Gregorian)
    PERSIAN_EPOCH: float = 1948320.5         # 0001-01-01 Solar Hijri (622-03-19)
    TropicalYear: float = 365.24219878       # days

    # テヘラン子午線 52°30'E（1日に対する割合へは /360）
    TehranLongitude: float = 52.0 + 30.0 / 60.0

    # 2820 年周期（算術モデル）
    CycleYears: int = 2820
    CycleDays: int = 1029983
    CycleLeapYears: int = 683
    CycleBaseYear: int = 474


const = _CalendarConst()

# 月の日数: 1-6 月 31 日, 7-11 月 30 日, 12 月 29 日（閏年 30 日）
FIRST_HALF_MONTH_DAYS = 31
SECOND_HALF_MONTH_DAYS = 30
DAYS_IN_FIRST_HALF = 6 * FIRST_HALF_MONTH_DAYS  # 186

__all__ = [
    "const",
    "_CalendarConst",
    "FIRST_HALF_MONTH_DAYS",
    "SECOND_HALF_MONTH_DAYS",
    "DAYS_IN_FIRST_HALF",
]
