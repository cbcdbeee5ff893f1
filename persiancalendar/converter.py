# persiancalendar/converter.py
# License: GNU GPL v3
#グレゴリオ暦 ⇄ ペルシア暦の変換（公開 API）
"""
Public conversion API.

Which model backs each operation
--------------------------------
* ``gregorian_to_persian`` / ``persian_to_gregorian`` / ``today`` /
  ``is_leap_year``: the model from ``calendar=`` when given, otherwise the
  configured default (``PERSIANCALENDAR_MODEL``), which is the astronomical
  model unless overridden.
* ``PersianDate.of`` / ``to_jd`` / ``to_gregorian`` resolve ``calendar=None``
  the same way, through :func:`persiancalendar.models.registry.get_calendar`.
* ``PersianDate.is_leap_year`` on converted dates comes from the same model
  that produced the date.
* ``day_of_week``: pure function of the Julian Day, model-independent.

Every call recomputes from scratch; nothing is cached between calls.
"""
from __future__ import annotations

from datetime import date
import logging
from typing import Union

from persiancalendar.Astrofunction.time_utils import jwday
from persiancalendar.dates import GregorianDate, PersianDate
from persiancalendar.errors import InvalidArgument
from persiancalendar.models.gregorian import gregorian_to_jd, jd_to_gregorian
from persiancalendar.models.registry import CalendarSpec, get_calendar
from persiancalendar.names import PersianMonth, PersianWeekday

logger = logging.getLogger(__name__)

MonthArg = Union[int, PersianMonth]


def _validate(year: int, month: int, day: int) -> None:
    if year < 0 or month < 0 or day < 0:
        raise InvalidArgument(
            f"Wrong value(s). date's year-month-day can not be negative (got {year}-{month}-{day})"
        )


def gregorian_to_persian(year: int, month: MonthArg, day: int, calendar: CalendarSpec = None) -> PersianDate:
    """
    Gregorian (year, month, day) -> PersianDate.

    Month and day past their normal ranges carry into following months and
    years.

    Raises
    ------
    InvalidArgument
        If any of year/month/day is negative.
    """
    _validate(year, month, day)
    cal = get_calendar(calendar)

    jd = gregorian_to_jd(year, int(month), day)
    pyear, pmonth, pday = cal.from_jd(jd)
    logger.debug("gregorian %s-%s-%s -> jd=%s -> persian %d-%d-%d (%s)",
                 year, month, day, jd, pyear, pmonth, pday, cal.name)

    return PersianDate(
        year=pyear,
        month=PersianMonth.of(pmonth),
        day=pday,
        weekday=PersianWeekday(jwday(jd)),
        is_leap_year=bool(cal.is_leap(pyear)),
    )


def persian_to_gregorian(year: int, month: MonthArg, day: int, calendar: CalendarSpec = None) -> GregorianDate:
    """
    Persian (year, month, day) -> GregorianDate.

    Month and day are not range-checked: day 32 of a 31-day month is the
    1st of the next one, 1397-12-30 is 1398-01-01.

    Raises
    ------
    InvalidArgument
        If any of year/month/day is negative.
    """
    _validate(year, month, day)
    cal = get_calendar(calendar)

    jd = cal.to_jd(year, int(month), day)
    gyear, gmonth, gday = jd_to_gregorian(jd)
    logger.debug("persian %s-%s-%s -> jd=%s -> gregorian %d-%d-%d (%s)",
                 year, month, day, jd, gyear, gmonth, gday, cal.name)
    return GregorianDate(gyear, gmonth, gday)


def from_date(d: date, calendar: CalendarSpec = None) -> PersianDate:
    """datetime.date -> PersianDate."""
    return gregorian_to_persian(d.year, d.month, d.day, calendar=calendar)


def today_gregorian() -> GregorianDate:
    """Host's current date in the Gregorian calendar."""
    return GregorianDate.from_date(date.today())


def today(calendar: CalendarSpec = None) -> PersianDate:
    """Host's current date in the Persian calendar."""
    return from_date(date.today(), calendar=calendar)


def is_leap_year(year: int, calendar: CalendarSpec = None) -> bool:
    """
    Leap-year predicate for a Persian year.

    ``calendar="arithmetic"`` gives the 2820-year cycle rule; the default
    derives it from the spacing of consecutive Tehran equinoxes.
    """
    if year < 0:
        raise InvalidArgument(f"Wrong value for year, it can not be negative (got {year})")
    return bool(get_calendar(calendar).is_leap(year))


def day_of_week(jd: float) -> PersianWeekday:
    """Weekday of a Julian Day; periodic with period 7."""
    return PersianWeekday(jwday(jd))


__all__ = [
    "gregorian_to_persian",
    "persian_to_gregorian",
    "from_date",
    "today",
    "today_gregorian",
    "is_leap_year",
    "day_of_week",
]
