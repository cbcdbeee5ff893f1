# tests/test_config.py
from __future__ import annotations

import pytest

from persiancalendar.config import CalendarConfig, load_config
from persiancalendar.errors import InvalidArgument
from persiancalendar.models.persian_arithmetic import ArithmeticPersianCalendar
from persiancalendar.models.persian_astronomical import AstronomicalPersianCalendar
from persiancalendar.models.registry import build_calendar, get_calendar


def test_defaults():
    cfg = load_config({})
    assert cfg == CalendarConfig()
    assert cfg.model == "astronomical"
    assert cfg.max_search_steps is None
    assert cfg.log_level == "WARNING"


def test_overrides():
    cfg = load_config({
        "PERSIANCALENDAR_MODEL": " Arithmetic ",
        "PERSIANCALENDAR_MAX_SEARCH_STEPS": "4",
        "PERSIANCALENDAR_LOG_LEVEL": "debug",
    })
    assert cfg == CalendarConfig(model="arithmetic", max_search_steps=4, log_level="DEBUG")


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PERSIANCALENDAR_MODEL", "arithmetic")
    assert load_config().model == "arithmetic"


@pytest.mark.parametrize(
    "env",
    [
        {"PERSIANCALENDAR_MODEL": "lunar"},
        {"PERSIANCALENDAR_MAX_SEARCH_STEPS": "many"},
        {"PERSIANCALENDAR_MAX_SEARCH_STEPS": "0"},
    ],
)
def test_invalid_values(env):
    with pytest.raises(InvalidArgument):
        load_config(env)


def test_registry():
    assert isinstance(get_calendar(), AstronomicalPersianCalendar)
    assert get_calendar().max_search_steps is None
    assert isinstance(get_calendar("arithmetic"), ArithmeticPersianCalendar)
    own = AstronomicalPersianCalendar(max_search_steps=4)
    assert get_calendar(own) is own
    assert build_calendar("astronomical", max_search_steps=3).max_search_steps == 3
    with pytest.raises(InvalidArgument):
        build_calendar("hijri")
    with pytest.raises(InvalidArgument):
        get_calendar("hijri")


def test_registry_follows_environment(monkeypatch):
    monkeypatch.setenv("PERSIANCALENDAR_MODEL", "arithmetic")
    monkeypatch.setenv("PERSIANCALENDAR_MAX_SEARCH_STEPS", "4")
    assert get_calendar().name == "arithmetic"
    # 名前で指定しても設定された探索上限を使う
    named = get_calendar("astronomical")
    assert named.max_search_steps == 4
