# persiancalendar/errors.py
# License: GNU GPL v3
from __future__ import annotations


class CalendarError(ValueError):
    """Base class for every error raised by persiancalendar."""


class InvalidArgument(CalendarError):
    """Negative or impossible year/month/day, or an unknown calendar model."""


class InvalidPattern(CalendarError):
    """Formatter pattern with an unsupported character or a field that cannot hold its value."""


__all__ = ["CalendarError", "InvalidArgument", "InvalidPattern"]
