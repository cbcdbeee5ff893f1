# persiancalendar/formatter.py
# License: GNU GPL v3
#ペルシア暦日付の書式化（英語表記／ペルシア語表記）
"""
Pattern letters
---------------
``yyyy``  year
``mm``    month number, zero padded (``m`` only fits months 10..12)
``M``     month name
``dd``    day, zero padded (``d`` only fits days 10..31)
`` ``, ``/``, ``-``  separators, repeated as written

In Persian output the digits are Extended Arabic-Indic (U+06F0..U+06F9)
and, when the pattern contains a month name, the fields are laid out
right-to-left (last field first).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from persiancalendar.errors import InvalidPattern
from persiancalendar.names import Language

if TYPE_CHECKING:
    from persiancalendar.dates import PersianDate

YEAR_FIELD = "year"
MONTH_FIELD = "month"
MONTH_STRING_FIELD = "month_string"
DAY_FIELD = "day"
SEPARATOR_FIELD = "separator"

SEPARATORS = (" ", "/", "-")
VALID_PATTERN_CHARACTERS = ("y", "m", "M", "d") + SEPARATORS

PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


@dataclass(frozen=True)
class TemporalField:
    """One run of a pattern letter, e.g. ``mm`` -> (MONTH_FIELD, 2)."""

    kind: str
    count: int
    literal: str = ""


def _field_for(cur: str, count: int) -> TemporalField:
    if cur == "y":
        if count == 2:
            raise InvalidPattern(f"Not enough pattern letters: {cur} (use yyyy)")
        if count != 4:
            raise InvalidPattern(f"Too many pattern letters: {cur} (use yyyy)")
        return TemporalField(YEAR_FIELD, 4)
    if cur == "m":
        if count > 2:
            raise InvalidPattern(f"Too many pattern letters: {cur}")
        return TemporalField(MONTH_FIELD, count)
    if cur == "M":
        if count != 1:
            raise InvalidPattern(f"Too many pattern letters: {cur}")
        return TemporalField(MONTH_STRING_FIELD, 1)
    if cur == "d":
        if count > 2:
            raise InvalidPattern(f"Too many pattern letters: {cur}")
        return TemporalField(DAY_FIELD, count)
    return TemporalField(SEPARATOR_FIELD, count, literal=cur * count)


def parse_pattern(pattern: str) -> Tuple[TemporalField, ...]:
    """
    Split a pattern into runs of identical characters.

    Raises
    ------
    InvalidPattern
        Unsupported character or a run length the field does not accept.
    """
    fields: List[TemporalField] = []
    pos = 0
    while pos < len(pattern):
        cur = pattern[pos]
        if cur not in VALID_PATTERN_CHARACTERS:
            raise InvalidPattern(f"Invalid character for formatting: {cur!r}")
        start = pos
        while pos < len(pattern) and pattern[pos] == cur:
            pos += 1
        fields.append(_field_for(cur, pos - start))
    return tuple(fields)


def _two_digit(value: int, count: int, what: str) -> str:
    if count == 2:
        return f"{value:02d}"
    # 1 文字のトークンは 2 桁の値にしか使えない
    if value < 10:
        raise InvalidPattern(f"format of {what} can not match with value {value}")
    return str(value)


class PersianDateFormatter:
    """
    Reusable formatter for :class:`PersianDate`.

    Parameters
    ----------
    pattern : str
        See module docstring. Parsed once, here.
    language : Language
        ``Language.ENGLISH`` (default) or ``Language.PERSIAN``.
    """

    def __init__(self, pattern: str, language: Language = Language.ENGLISH):
        self.pattern = pattern
        self.language = Language(language)
        self.fields = parse_pattern(pattern)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern!r}, {self.language})"

    def _apply(self, field: TemporalField, date: "PersianDate") -> str:
        if field.kind == YEAR_FIELD:
            return str(date.year)
        if field.kind == MONTH_FIELD:
            return _two_digit(int(date.month), field.count, "month")
        if field.kind == DAY_FIELD:
            return _two_digit(date.day, field.count, "day")
        if field.kind == MONTH_STRING_FIELD:
            return date.month.name_in(self.language)
        return field.literal

    def format(self, date: "PersianDate") -> str:
        fields = self.fields
        persian = self.language is Language.PERSIAN
        if persian and any(f.kind == MONTH_STRING_FIELD for f in fields):
            fields = tuple(reversed(fields))

        result = "".join(self._apply(f, date) for f in fields)
        if persian:
            result = result.translate(PERSIAN_DIGITS)
        return result


__all__ = [
    "TemporalField",
    "parse_pattern",
    "PersianDateFormatter",
    "PERSIAN_DIGITS",
    "VALID_PATTERN_CHARACTERS",
]
