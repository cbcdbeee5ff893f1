# persiancalendar/models/registry.py
# License: GNU GPL v3
#暦モデルの選択（名前・インスタンス・環境変数の既定値）
from __future__ import annotations

from typing import Optional, Union

from persiancalendar.config import DEFAULT_MODEL, MODEL_NAMES, load_config
from persiancalendar.errors import InvalidArgument
from persiancalendar.models.calendar_model import PersianCalendarModel
from persiancalendar.models.persian_arithmetic import ArithmeticPersianCalendar
from persiancalendar.models.persian_astronomical import AstronomicalPersianCalendar

CalendarSpec = Union[str, PersianCalendarModel, None]


def build_calendar(name: str, *, max_search_steps: Optional[int] = None) -> PersianCalendarModel:
    """Instantiate a calendar model by name ('astronomical' or 'arithmetic')."""
    key = str(name).strip().lower()
    if key == AstronomicalPersianCalendar.name:
        return AstronomicalPersianCalendar(max_search_steps=max_search_steps)
    if key == ArithmeticPersianCalendar.name:
        return ArithmeticPersianCalendar()
    raise InvalidArgument(f"Unknown calendar model: {name!r} (expected one of {MODEL_NAMES})")


def get_calendar(spec: CalendarSpec = None) -> PersianCalendarModel:
    """
    Resolve a calendar argument against the current configuration.

    ``None`` -> the configured model (``PERSIANCALENDAR_MODEL``), a string
    -> that model; both carry the configured search ceiling
    (``PERSIANCALENDAR_MAX_SEARCH_STEPS``). Anything else is returned as-is
    and must implement :class:`PersianCalendarModel`.

    Raises
    ------
    InvalidArgument
        Unknown model name, or an invalid value in the environment.
    """
    if spec is not None and not isinstance(spec, str):
        return spec
    # 呼び出しごとに読み直す（環境変数の変更をそのまま反映）
    cfg = load_config()
    name = cfg.model if spec is None else spec
    return build_calendar(name, max_search_steps=cfg.max_search_steps)


__all__ = ["DEFAULT_MODEL", "MODEL_NAMES", "CalendarSpec", "build_calendar", "get_calendar"]
