# persiancalendar/config.py
# License: GNU GPL v3
#変換の既定設定（環境変数で上書き可能）
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from persiancalendar.errors import InvalidArgument
from persiancalendar.models.persian_arithmetic import ArithmeticPersianCalendar
from persiancalendar.models.persian_astronomical import AstronomicalPersianCalendar

ENV_MODEL = "PERSIANCALENDAR_MODEL"
ENV_MAX_SEARCH_STEPS = "PERSIANCALENDAR_MAX_SEARCH_STEPS"
ENV_LOG_LEVEL = "PERSIANCALENDAR_LOG_LEVEL"

DEFAULT_MODEL = AstronomicalPersianCalendar.name
MODEL_NAMES = (AstronomicalPersianCalendar.name, ArithmeticPersianCalendar.name)


@dataclass(frozen=True)
class CalendarConfig:
    model: str = DEFAULT_MODEL   # 'astronomical' | 'arithmetic'
    max_search_steps: Optional[int] = None   # 春分探索の反復上限（None は無制限）
    log_level: str = "WARNING"   # CLI のみが使用


def load_config(environ: Optional[Mapping[str, str]] = None) -> CalendarConfig:
    """
    Build a CalendarConfig from environment variables.

    Parameters
    ----------
    environ : mapping, optional
        Defaults to ``os.environ``.

    Raises
    ------
    InvalidArgument
        Unknown model name or a non-positive / non-integer step count.

    Notes
    -----
    未設定の探索上限は None（無制限）。
    """
    env = os.environ if environ is None else environ
    defaults = CalendarConfig()

    model = env.get(ENV_MODEL, defaults.model).strip().lower()
    if model not in MODEL_NAMES:
        raise InvalidArgument(f"{ENV_MODEL}={model!r} is not one of {MODEL_NAMES}")

    raw_steps = env.get(ENV_MAX_SEARCH_STEPS)
    steps = defaults.max_search_steps
    if raw_steps is not None:
        try:
            steps = int(raw_steps)
        except ValueError:
            raise InvalidArgument(f"{ENV_MAX_SEARCH_STEPS} must be an integer (got {raw_steps!r})") from None
        if steps < 1:
            raise InvalidArgument(f"{ENV_MAX_SEARCH_STEPS} must be >= 1 (got {steps})")

    log_level = env.get(ENV_LOG_LEVEL, defaults.log_level).strip().upper()

    return CalendarConfig(model=model, max_search_steps=steps, log_level=log_level)


__all__ = ["CalendarConfig", "load_config", "ENV_MODEL", "ENV_MAX_SEARCH_STEPS", "ENV_LOG_LEVEL",
           "DEFAULT_MODEL", "MODEL_NAMES"]
