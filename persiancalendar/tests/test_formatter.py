# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest

from persiancalendar.converter import gregorian_to_persian
from persiancalendar.dates import PersianDate
from persiancalendar.errors import InvalidPattern
from persiancalendar.formatter import PersianDateFormatter, TemporalField, parse_pattern
from persiancalendar.names import Language


@pytest.fixture(scope="module")
def bahman_28():
    return gregorian_to_persian(1992, 2, 17)


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("yyyy/mm/dd", "۱۳۷۰/۱۱/۲۸"),
        ("yyyy/M/dd", "۲۸/بهمن/۱۳۷۰"),
        ("yyyy/ M dd", "۲۸ بهمن /۱۳۷۰"),
        ("yyyy- M dd", "۲۸ بهمن -۱۳۷۰"),
        ("yyyy M dd", "۲۸ بهمن ۱۳۷۰"),
        ("yyyyMdd", "۲۸بهمن۱۳۷۰"),
    ],
)
def test_persian_output(bahman_28, pattern, expected):
    assert bahman_28.format(PersianDateFormatter(pattern, Language.PERSIAN)) == expected


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("yyyy M dd", "1370 Bahman 28"),
        ("yyyy/mm/dd", "1370/11/28"),
        ("dd-mm-yyyy", "28-11-1370"),
        ("yyyy/m/d", "1370/11/28"),
    ],
)
def test_english_output(bahman_28, pattern, expected):
    assert bahman_28.format(PersianDateFormatter(pattern)) == expected


def test_zero_padded_persian_digits():
    p = gregorian_to_persian(2015, 7, 28)
    assert p.format(PersianDateFormatter("yyyy/mm/dd", Language.PERSIAN)) == "۱۳۹۴/۰۵/۰۶"
    assert p.format(PersianDateFormatter("yyyy/mm/dd")) == "1394/05/06"


def test_single_letter_needs_two_digit_value():
    p = PersianDate.of(1394, 5, 16)
    with pytest.raises(InvalidPattern):
        p.format(PersianDateFormatter("yyyy/m/dd"))
    q = PersianDate.of(1394, 11, 6)
    with pytest.raises(InvalidPattern):
        q.format(PersianDateFormatter("yyyy/mm/d"))


@pytest.mark.parametrize("pattern", ["yy/mm/dd", "yyyyy", "yyy", "mmm", "MM", "ddd", "yyyy.mm.dd", "yyyy/mm/dd x"])
def test_invalid_patterns(pattern):
    with pytest.raises(InvalidPattern):
        PersianDateFormatter(pattern)


def test_two_year_letters_message():
    with pytest.raises(InvalidPattern, match="Not enough pattern letters"):
        parse_pattern("yy")


def test_parse_pattern_runs():
    assert parse_pattern("yyyy/ M") == (
        TemporalField("year", 4),
        TemporalField("separator", 1, "/"),
        TemporalField("separator", 1, " "),
        TemporalField("month_string", 1),
    )
    assert parse_pattern("") == ()


def test_formatter_is_reusable(bahman_28):
    fmt = PersianDateFormatter("yyyy M dd", Language.PERSIAN)
    other = gregorian_to_persian(2015, 7, 28)
    assert bahman_28.format(fmt) == "۲۸ بهمن ۱۳۷۰"
    assert other.format(fmt) == "۰۶ مرداد ۱۳۹۴"
    assert bahman_28.format(fmt) == "۲۸ بهمن ۱۳۷۰"
