# persiancalendar/models/calendar_model.py
# License: GNU GPL v3
#ペルシア暦モデル（天文／算術）の共通インターフェースと月日計算
from __future__ import annotations

import math
from typing import Protocol, Tuple

from persiancalendar.constants import (
    DAYS_IN_FIRST_HALF,
    FIRST_HALF_MONTH_DAYS,
    SECOND_HALF_MONTH_DAYS,
)


class PersianCalendarModel(Protocol):
    """
    Strategy interface shared by the astronomical and arithmetic models.

    Julian Days crossing this interface follow the civil-midnight
    convention (``N + 0.5`` is 00:00 of civil day N+1).
    """

    name: str

    def to_jd(self, year: float, month: float, day: float) -> float:
        ...

    def from_jd(self, jd: float) -> Tuple[int, int, int]:
        ...

    def is_leap(self, year: float) -> bool:
        ...


def month_offset(month: float) -> float:
    """Days from 1 Farvardin to the 1st of ``month`` (linear, no range check)."""
    if month <= 7:
        return (month - 1) * FIRST_HALF_MONTH_DAYS
    return (month - 1) * SECOND_HALF_MONTH_DAYS + 6


def month_from_day_of_year(yday: float) -> int:
    """1-based day of year -> month (31 x 6, then 30 x 5, then 29/30)."""
    if yday <= DAYS_IN_FIRST_HALF:
        return int(math.ceil(yday / FIRST_HALF_MONTH_DAYS))
    return int(math.ceil((yday - 6) / SECOND_HALF_MONTH_DAYS))


__all__ = ["PersianCalendarModel", "month_offset", "month_from_day_of_year"]
