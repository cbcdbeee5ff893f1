# persiancalendar/dates.py
# License: GNU GPL v3
#日付の値オブジェクト（ペルシア暦・グレゴリオ暦）
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from persiancalendar.Astrofunction.time_utils import jwday
from persiancalendar.errors import InvalidArgument
from persiancalendar.models.gregorian import gregorian_to_jd, jd_to_gregorian
from persiancalendar.models.registry import CalendarSpec, get_calendar
from persiancalendar.names import PersianMonth, PersianWeekday

if TYPE_CHECKING:
    from persiancalendar.formatter import PersianDateFormatter


@dataclass(frozen=True)
class GregorianDate:
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: _dt.date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    @property
    def jd(self) -> float:
        """Julian Day at civil midnight."""
        return gregorian_to_jd(self.year, self.month, self.day)

    @property
    def weekday(self) -> PersianWeekday:
        return PersianWeekday(jwday(self.jd))

    def to_date(self) -> _dt.date:
        """datetime.date; raises ValueError outside years 1..9999."""
        return _dt.date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class PersianDate:
    """
    A Solar Hijri date with its derived weekday and leap flag.

    Build with :meth:`of` for caller-supplied values (validated) or get one
    from :func:`persiancalendar.converter.gregorian_to_persian`.
    """

    year: int
    month: PersianMonth
    day: int
    weekday: PersianWeekday
    is_leap_year: bool

    @classmethod
    def of(
        cls,
        year: int,
        month: Union[int, PersianMonth],
        day: int,
        calendar: CalendarSpec = None,
    ) -> "PersianDate":
        """
        Validated construction.

        Raises
        ------
        InvalidArgument
            month not in 1..12, day not in 1..31, year <= 0, day 31 in
            months 7..12, or 30 Esfand in a common year.
        """
        if not 1 <= month <= 12:
            raise InvalidArgument(f"Wrong value for month, it must be from 1 to 12 (got {month})")
        if not 1 <= day <= 31:
            raise InvalidArgument(f"Wrong value for day, it must be from 1 to 31 (got {day})")
        if year <= 0:
            raise InvalidArgument(f"Wrong value for year, it must be positive (got {year})")
        if month >= 7 and day == 31:
            raise InvalidArgument("Wrong value for day, months 7 to 12 have less than 31 days")

        cal = get_calendar(calendar)
        leap = cal.is_leap(year)
        if month == 12 and day == 30 and not leap:
            raise InvalidArgument(f"Esfand {year} has 29 days; day 30 exists only in a leap year")

        jd = cal.to_jd(year, month, day)
        return cls(
            year=int(year),
            month=PersianMonth.of(int(month)),
            day=int(day),
            weekday=PersianWeekday(jwday(jd)),
            is_leap_year=bool(leap),
        )

    def to_jd(self, calendar: CalendarSpec = None) -> float:
        return get_calendar(calendar).to_jd(self.year, int(self.month), self.day)

    def to_gregorian(self, calendar: CalendarSpec = None) -> GregorianDate:
        return GregorianDate(*jd_to_gregorian(self.to_jd(calendar)))

    def format(self, formatter: "PersianDateFormatter") -> str:
        if formatter is None:
            raise TypeError("formatter must not be None")
        return formatter.format(self)

    def __str__(self) -> str:
        return f"{self.year:04d}-{int(self.month):02d}-{self.day:02d}"


__all__ = ["GregorianDate", "PersianDate"]
