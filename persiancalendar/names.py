# persiancalendar/names.py
# License: GNU GPL v3
#月名・曜日名（英語表記とペルシア語表記）
from __future__ import annotations

from enum import Enum, IntEnum

from persiancalendar.constants import FIRST_HALF_MONTH_DAYS, SECOND_HALF_MONTH_DAYS
from persiancalendar.errors import InvalidArgument


class Language(Enum):
    ENGLISH = "en"
    PERSIAN = "fa"


class _NamedIntEnum(IntEnum):
    """IntEnum whose members carry an English and a Persian name."""

    def __new__(cls, value: int, english: str, persian: str):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.english = english
        obj.persian = persian
        return obj

    def name_in(self, language: Language) -> str:
        return self.persian if language is Language.PERSIAN else self.english

    @classmethod
    def of(cls, value: int):
        """Member for an integer value; raises InvalidArgument when out of range."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(f"Invalid value for {cls.__name__}: {value}") from None


class PersianMonth(_NamedIntEnum):
    """Months of the Solar Hijri year, Farvardin = 1 .. Esfand = 12."""

    FARVARDIN = (1, "Farvardin", "فروردین")
    ORDIBEHESHT = (2, "Ordibehesht", "اردیبهشت")
    KHORDAD = (3, "Khordad", "خرداد")
    TIR = (4, "Tir", "تیر")
    MORDAD = (5, "Mordad", "مرداد")
    SHAHRIVAR = (6, "Shahrivar", "شهریور")
    MEHR = (7, "Mehr", "مهر")
    ABAN = (8, "Aban", "آبان")
    AZAR = (9, "Azar", "آذر")
    DAY = (10, "Day", "دی")
    BAHMAN = (11, "Bahman", "بهمن")
    ESFAND = (12, "Esfand", "اسفند")

    def length(self, leap: bool = False) -> int:
        """Number of days: 31 for months 1-6, 30 for 7-11, 29 (30 in a leap year) for Esfand."""
        if self <= PersianMonth.SHAHRIVAR:
            return FIRST_HALF_MONTH_DAYS
        if self is PersianMonth.ESFAND:
            return 30 if leap else 29
        return SECOND_HALF_MONTH_DAYS


class PersianWeekday(_NamedIntEnum):
    """Days of the week, Yekshanbeh (Sunday) = 0 .. Shanbeh (Saturday) = 6."""

    YEKSHANBEH = (0, "Yekshanbeh", "یکشنبه")
    DOSHANBEH = (1, "Doshanbeh", "دوشنبه")
    SESHANBEH = (2, "Seshanbeh", "سه شنبه")
    CHAHARSHANBEH = (3, "Chaharshanbeh", "چهارشنبه")
    PANJSHANBEH = (4, "Panjshanbeh", "پنج شنبه")
    JOMEH = (5, "Jomeh", "جمعه")
    SHANBEH = (6, "Shanbeh", "شنبه")


__all__ = ["Language", "PersianMonth", "PersianWeekday"]
