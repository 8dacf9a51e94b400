"""
Korean lunar ↔ solar date conversion.

Thin adapter over korean_lunar_calendar (KASI-based tables, lunar years
1000-2050). A fresh KoreanLunarCalendar is created per call; the library
object is stateful and must not be shared between callers.
"""

import logging
from dataclasses import dataclass
from datetime import date

from korean_lunar_calendar import KoreanLunarCalendar

from manse.errors import LunarConversionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    day: int
    is_leap_month: bool = False

    def __str__(self):
        leap = "윤" if self.is_leap_month else ""
        return f"{self.year:04d}-{leap}{self.month:02d}-{self.day:02d}"


def lunar_to_solar(year: int, month: int, day: int, is_leap_month: bool = False) -> date:
    """
    Convert a Korean lunar date to its Gregorian date.

    Args:
        year, month, day: lunar date
        is_leap_month: True for the intercalary (윤달) month

    Raises:
        LunarConversionError: the date does not exist in the lunar
            calendar (day 30 of a short month, a leap month the year
            does not have, a year outside the table)
    """
    lunar = LunarDate(year, month, day, is_leap_month)
    calendar = KoreanLunarCalendar()
    if not calendar.setLunarDate(year, month, day, is_leap_month):
        raise LunarConversionError(f"Invalid lunar date: {lunar}")
    solar = date(calendar.solarYear, calendar.solarMonth, calendar.solarDay)

    # Older library releases accept a leap flag for a month that has no
    # leap twin and silently convert the regular month.
    if solar_to_lunar(solar) != lunar:
        raise LunarConversionError(f"Invalid lunar date: {lunar}")

    logger.debug("lunar %s → solar %s", lunar, solar)
    return solar


def solar_to_lunar(solar: date) -> LunarDate:
    """Convert a Gregorian date to the Korean lunar calendar."""
    calendar = KoreanLunarCalendar()
    if not calendar.setSolarDate(solar.year, solar.month, solar.day):
        raise LunarConversionError(f"Solar date outside the lunar table: {solar}")
    return LunarDate(
        calendar.lunarYear, calendar.lunarMonth, calendar.lunarDay,
        bool(calendar.isIntercalation),
    )
