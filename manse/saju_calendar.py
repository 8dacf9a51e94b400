"""
Calendar utilities for Saju calculations.
Handles date validation, Julian Day Numbers, the fixed solar term
table, LMT correction, and date range generation.
"""

from datetime import date, datetime, timedelta
from typing import Iterator, Union

from manse.errors import InvalidDateError

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def validate_date(year: int, month: int, day: int) -> None:
    """
    Reject impossible proleptic Gregorian dates.

    Raises:
        InvalidDateError: e.g. 2023-02-29, 1990-04-31, month 13
    """
    last_day = days_in_month(year, month)
    if not 1 <= day <= last_day:
        raise InvalidDateError(
            f"{year:04d}-{month:02d} has {last_day} days, got day {day}"
        )


def validate_time(hour: int, minute: int) -> None:
    if not 0 <= hour <= 23:
        raise InvalidDateError(f"Hour must be 0-23, got {hour}")
    if not 0 <= minute <= 59:
        raise InvalidDateError(f"Minute must be 0-59, got {minute}")


def julian_day_number(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian date to Julian Day Number (integer, noon-based).

    Closed-form Fliegel & Van Flandern formula; the calendar is
    linearized so consecutive dates always differ by exactly 1.

    Example:
        2000-01-01 → 2451545
        1949-10-01 → 2433191
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (day + (153 * m + 2) // 5 + 365 * y
            + y // 4 - y // 100 + y // 400 - 32045)


# ============================================================
# SOLAR TERM BOUNDARIES
# ============================================================
#
# The 12 Jeol (절) solar terms mark Saju month boundaries. Each term
# falls on a slightly different day every year; this table fixes one
# cutoff day per Gregorian month instead of computing the Sun's
# longitude, so a birth within a day or two of a term can land in the
# neighbouring month. That drift is accepted, not corrected.
#
# 입춘 (Feb 4) → Tiger month (solar month 1)
# 경칩 (Mar 6) → Rabbit month (2)
# 청명 (Apr 5) → Dragon month (3)
# 입하 (May 6) → Snake month (4)
# 망종 (Jun 6) → Horse month (5)
# 소서 (Jul 7) → Goat month (6)
# 입추 (Aug 8) → Monkey month (7)
# 백로 (Sep 8) → Rooster month (8)
# 한로 (Oct 8) → Dog month (9)
# 입동 (Nov 7) → Pig month (10)
# 대설 (Dec 7) → Rat month (11)
# 소한 (Jan 6) → Ox month (12)

# (gregorian_month, cutoff_day, term_name)
SOLAR_TERM_BOUNDARIES = (
    (1, 6, "소한"),
    (2, 4, "입춘"),
    (3, 6, "경칩"),
    (4, 5, "청명"),
    (5, 6, "입하"),
    (6, 6, "망종"),
    (7, 7, "소서"),
    (8, 8, "입추"),
    (9, 8, "백로"),
    (10, 8, "한로"),
    (11, 7, "입동"),
    (12, 7, "대설"),
)

LICHUN_MONTH = 2
LICHUN_DAY = 4


def _check_month_day(month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be 1-12, got {month}")
    # Year-independent check; Feb 29 is allowed here and validated with the year elsewhere
    if not 1 <= day <= (29 if month == 2 else _DAYS_IN_MONTH[month - 1]):
        raise InvalidDateError(f"Invalid day {day} for month {month}")


def solar_month(month: int, day: int) -> int:
    """
    Map a Gregorian month/day to its Saju solar month (1-12).

    Solar month 1 starts at 입춘 and is the Tiger (인) month;
    solar month 12 starts at 소한 and is the Ox (축) month.

    Args:
        month, day: Gregorian month and day

    Returns:
        Solar month number 1-12
    """
    _check_month_day(month, day)
    _, cutoff, _ = SOLAR_TERM_BOUNDARIES[month - 1]
    if day >= cutoff:
        return (month - 2) % 12 + 1
    return (month - 3) % 12 + 1


def solar_term(month: int, day: int) -> str:
    """Name of the Jeol term whose month contains the given date."""
    _check_month_day(month, day)
    _, cutoff, name = SOLAR_TERM_BOUNDARIES[month - 1]
    if day >= cutoff:
        return name
    return SOLAR_TERM_BOUNDARIES[(month - 2) % 12][2]


def is_before_lichun(month: int, day: int) -> bool:
    """True when the date still belongs to the previous Saju year."""
    return month < LICHUN_MONTH or (month == LICHUN_MONTH and day < LICHUN_DAY)


# ============================================================
# LOCAL MEAN TIME
# ============================================================

def lmt_correction(longitude: float, standard_meridian: float = 135.0) -> float:
    """
    Calculate Local Mean Time correction in minutes.

    Korea keeps time on the 135°E meridian while Seoul sits near
    127°E, so the clock runs about half an hour ahead of the Sun.

    Args:
        longitude: birth location longitude in degrees (east positive)
        standard_meridian: timezone standard meridian (135.0 for KST)

    Returns:
        Correction in minutes (negative = subtract from clock time)

    Example:
        Seoul (127.0°E): correction = (127.0 - 135.0) * 4 = -32 min
        So 04:00 clock time → 03:28 LMT
    """
    return (longitude - standard_meridian) * 4.0


def apply_lmt(clock_time: datetime, longitude: float,
              standard_meridian: float = 135.0) -> datetime:
    """
    Convert standard clock time to Local Mean Time.

    Args:
        clock_time: datetime in standard (non-DST) time
        longitude: birth location longitude
        standard_meridian: timezone standard meridian

    Returns:
        datetime adjusted to LMT
    """
    correction_minutes = lmt_correction(longitude, standard_meridian)
    return clock_time + timedelta(minutes=correction_minutes)


def date_range(start: Union[date, str], end: Union[date, str]) -> Iterator[date]:
    """
    Yield every date between start and end (inclusive).
    """
    if isinstance(start, str):
        start = date.fromisoformat(start)
    if isinstance(end, str):
        end = date.fromisoformat(end)

    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


# Quick verification
if __name__ == "__main__":
    print(f"JDN 2000-01-01: {julian_day_number(2000, 1, 1)}")

    clock_time = datetime(1971, 11, 17, 4, 0)
    lmt = apply_lmt(clock_time, 127.0)
    print(f"Seoul LMT correction: {lmt_correction(127.0):.1f} minutes")
    print(f"Clock time: {clock_time:%H:%M} → LMT: {lmt:%H:%M}")

    print("\nSolar months:")
    for month, cutoff, name in SOLAR_TERM_BOUNDARIES:
        print(f"  {name}: {month:02d}-{cutoff:02d} → solar month {solar_month(month, cutoff)}")
