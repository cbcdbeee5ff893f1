# persiancalendar/models/persian_astronomical.py
# License: GNU GPL v3
#天文学的ペルシア暦：テヘランでの春分日を年初とする
from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from persiancalendar.Astrofunction.equinox import tehran_equinox_jd
from persiancalendar.constants import const
from persiancalendar.models.calendar_model import month_from_day_of_year, month_offset
from persiancalendar.models.gregorian import jd_to_gregorian

logger = logging.getLogger(__name__)


def _persian_year_number(equinox_jd: float) -> int:
    # Math.round 相当（四捨五入）。Python の round は偶数丸めなので使わない
    return int(math.floor((equinox_jd - const.PERSIAN_EPOCH) / const.TropicalYear + 0.5)) + 1


class AstronomicalPersianCalendar:
    """
    Solar Hijri calendar whose years start on the civil day of the March
    equinox at the Tehran meridian.

    Year boundaries come from :func:`tehran_equinox_jd`; a year is leap
    when consecutive equinox days are 366 days apart.

    Parameters
    ----------
    max_search_steps : int or None
        Optional ceiling on the moves taken while bracketing a Julian Day
        between two equinoxes; exceeding it raises ``RuntimeError``.
        ``None`` (default) leaves the search unbounded. Normal inputs need
        one or two moves.
    """

    name = "astronomical"

    def __init__(self, max_search_steps: Optional[int] = None):
        if max_search_steps is not None:
            if max_search_steps < 1:
                raise ValueError("max_search_steps must be >= 1")
            max_search_steps = int(max_search_steps)
        self.max_search_steps = max_search_steps

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_search_steps={self.max_search_steps})"

    def locate(self, jd: float) -> Tuple[int, float, int]:
        """
        Bracket ``jd`` between two consecutive Tehran equinox days.

        Returns
        -------
        (persian_year, equinox_jd, steps)
            ``equinox_jd`` is the integer equinox day that starts the year;
            ``steps`` counts the moves taken by the search.
        """
        guess = jd_to_gregorian(jd)[0] - 2
        steps = 0

        lasteq = tehran_equinox_jd(guess)
        # 遠い年では多項式のドリフトで推定が何年もずれるので、まず年数ぶん寄せる
        while abs(jd - lasteq) > 4 * const.TropicalYear:
            guess += int(math.floor((jd - lasteq) / const.TropicalYear))
            steps += 1
            self._check_steps(jd, steps)
            lasteq = tehran_equinox_jd(guess)

        # 推定が先に行き過ぎていれば戻る
        while lasteq > jd:
            guess -= 1
            steps += 1
            self._check_steps(jd, steps)
            lasteq = tehran_equinox_jd(guess)

        # [lasteq, nexteq) に入るまで進める
        nexteq = tehran_equinox_jd(guess + 1)
        while not (lasteq <= jd < nexteq):
            guess += 1
            steps += 1
            self._check_steps(jd, steps)
            lasteq = nexteq
            nexteq = tehran_equinox_jd(guess + 1)

        year = _persian_year_number(lasteq)
        logger.debug("equinox search jd=%s -> year=%d equinox=%s steps=%d", jd, year, lasteq, steps)
        return year, lasteq, steps

    def _check_steps(self, jd: float, steps: int) -> None:
        if self.max_search_steps is not None and steps > self.max_search_steps:
            raise RuntimeError(
                f"equinox search for jd={jd} did not converge within {self.max_search_steps} steps"
            )

    def year_and_equinox(self, jd: float) -> Tuple[int, float]:
        """Persian year containing ``jd`` and the equinox day that starts it."""
        year, lasteq, _ = self.locate(jd)
        return year, lasteq

    def equinox_day(self, year: float) -> float:
        """Integer equinox day (Julian Day) on which Persian ``year`` begins."""
        guess = (const.PERSIAN_EPOCH - 1) + const.TropicalYear * ((year - 1) - 1)
        found = year - 1
        equinox = 0.0
        while found < year:
            found, equinox = self.year_and_equinox(guess)
            guess = equinox + (const.TropicalYear + 2)
        return equinox

    def to_jd(self, year: float, month: float, day: float) -> float:
        """
        Persian (year, month, day) -> Julian Day at civil midnight.

        Month and day are not range-checked; overflowing values carry into
        later months and years.
        """
        return self.equinox_day(year) + month_offset(month) + (day - 1) + 0.5

    def from_jd(self, jd: float) -> Tuple[int, int, int]:
        """Julian Day -> Persian (year, month, day)."""
        jd = math.floor(jd) + 0.5
        year, equinox = self.year_and_equinox(jd)

        yday = (math.floor(jd) - equinox) + 1
        month = month_from_day_of_year(yday)
        day = (math.floor(jd) - (equinox + month_offset(month))) + 1
        return int(year), int(month), int(day)

    def is_leap(self, year: float) -> bool:
        """True when ``year`` is 366 days long (equinox days 366 apart)."""
        return (self.equinox_day(year + 1) - self.equinox_day(year)) > 365


__all__ = ["AstronomicalPersianCalendar"]
