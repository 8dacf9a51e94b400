"""
Four Pillars (사주) computation.

Handles:
- Year pillar (입춘-based year boundary)
- Month pillar (solar term month + five tigers rule)
- Day pillar (Julian Day Number + fixed sexagenary anchor)
- Hour pillar (2-hour buckets + five rats rule)

Every function is pure and reads only the immutable tables below.
Time corrections (DST, LMT) happen before these are called; see
manse.clock.
"""

from manse.errors import InvalidDateError, UnsupportedYearError
from manse.ganji import GanJi, HeavenlyStem, STEM_BY_KOREAN, add, pair_at, pair_of
from manse.saju_calendar import (
    is_before_lichun, julian_day_number, solar_month, validate_date, validate_time,
)

MIN_SUPPORTED_YEAR = 1900
MAX_SUPPORTED_YEAR = 2100

# 1984 (갑자년) starts the current cycle of years.
YEAR_ANCHOR = 1984

# Day anchor: 1949-10-01 is a 甲子 day (JDN 2433191).
DAY_ANCHOR_DATE = (1949, 10, 1)
DAY_ANCHOR_JDN = 2433191
DAY_ANCHOR_INDEX = 0


# ============================================================
# STEM TABLES
# ============================================================

# Five Tigers (오호둔): stem of the Tiger month for each year stem
#   갑/기 → 병인, 을/경 → 무인, 병/신 → 경인, 정/임 → 임인, 무/계 → 갑인
_TIGER_MONTH_STEMS = (2, 4, 6, 8, 0)

# Five Rats (오서둔): stem of the Rat hour for each day stem
#   갑/기 → 갑자, 을/경 → 병자, 병/신 → 무자, 정/임 → 경자, 무/계 → 임자
_RAT_HOUR_STEMS = (0, 2, 4, 6, 8)

# MONTH_STEM_TABLE[year_stem][solar_month - 1] → month stem index
MONTH_STEM_TABLE = tuple(
    tuple((_TIGER_MONTH_STEMS[stem % 5] + m) % 10 for m in range(12))
    for stem in range(10)
)

# HOUR_STEM_TABLE[day_stem][hour_branch] → hour stem index
HOUR_STEM_TABLE = tuple(
    tuple((_RAT_HOUR_STEMS[stem % 5] + b) % 10 for b in range(12))
    for stem in range(10)
)


def check_supported_year(year: int) -> None:
    if not MIN_SUPPORTED_YEAR <= year <= MAX_SUPPORTED_YEAR:
        raise UnsupportedYearError(
            f"Year {year} is outside the supported range "
            f"{MIN_SUPPORTED_YEAR}-{MAX_SUPPORTED_YEAR}"
        )


# ============================================================
# PILLAR COMPUTATION
# ============================================================

def year_pillar(year: int, month: int, day: int) -> GanJi:
    """
    Compute the Year Pillar.

    The Saju year starts at 입춘 (taken as Feb 4). Dates in January
    or before Feb 4 belong to the previous year's pillar.

    Raises:
        UnsupportedYearError: year outside 1900-2100
        InvalidDateError: impossible date
    """
    check_supported_year(year)
    validate_date(year, month, day)

    effective_year = year - 1 if is_before_lichun(month, day) else year
    return pair_at(effective_year - YEAR_ANCHOR)


def month_pillar(year: int, month: int, day: int) -> GanJi:
    """
    Compute the Month Pillar.

    The month branch comes from the solar term table (Tiger month first);
    the stem follows from the year stem via the Five Tigers rule.
    """
    year_stem = year_pillar(year, month, day).stem
    sm = solar_month(month, day)

    stem_index = MONTH_STEM_TABLE[year_stem.index][sm - 1]
    branch_index = (sm + 1) % 12  # solar month 1 → 인 (2)
    return pair_of(stem_index, branch_index)


def day_index(year: int, month: int, day: int) -> int:
    """Sexagenary index (0-59) of a Gregorian date."""
    validate_date(year, month, day)
    return add(DAY_ANCHOR_INDEX, julian_day_number(year, month, day) - DAY_ANCHOR_JDN)


def day_pillar(year: int, month: int, day: int) -> GanJi:
    """
    Compute the Day Pillar using Julian Day Number.

    The 60-day cycle has run unbroken for millennia, so a single anchor
    day fixes every other day: index = anchor + (JDN - anchor JDN) mod 60.
    """
    return pair_at(day_index(year, month, day))


def hour_branch_index(hour: int) -> int:
    """
    Map a clock hour to its shichen branch index.

    23:00-00:59 = 자 (0)    11:00-12:59 = 오 (6)
    01:00-02:59 = 축 (1)    13:00-14:59 = 미 (7)
    03:00-04:59 = 인 (2)    15:00-16:59 = 신 (8)
    05:00-06:59 = 묘 (3)    17:00-18:59 = 유 (9)
    07:00-08:59 = 진 (4)    19:00-20:59 = 술 (10)
    09:00-10:59 = 사 (5)    21:00-22:59 = 해 (11)

    Buckets are half-open and start on the odd hour: xx:00 of an odd
    hour opens a new bucket, minutes never move the boundary.
    """
    if not 0 <= hour <= 23:
        raise InvalidDateError(f"Hour must be 0-23, got {hour}")
    return ((hour + 1) % 24) // 2


def hour_pillar(day_stem, hour: int, minute: int = 0) -> GanJi:
    """
    Compute the Hour Pillar using the Five Rats rule.

    IMPORTANT: pass the corrected hour, not clock time, and for
    23:00-23:59 the stem of the day that owns the Rat hour.

    Args:
        day_stem: HeavenlyStem or its Korean name ("병")
        hour: hour in 24h format
        minute: minute (validated; does not affect the bucket)
    """
    validate_time(hour, minute)
    if not isinstance(day_stem, HeavenlyStem):
        if day_stem not in STEM_BY_KOREAN:
            raise ValueError(f"Unknown heavenly stem: {day_stem!r}")
        day_stem = STEM_BY_KOREAN[day_stem]

    branch_index = hour_branch_index(hour)
    stem_index = HOUR_STEM_TABLE[day_stem.index][branch_index]
    return pair_of(stem_index, branch_index)


# ============================================================
# TEST / VERIFICATION
# ============================================================

if __name__ == "__main__":
    print("Pillar Computation Test: 1971-11-17 04:00 (corrected 03:28)")
    yp = year_pillar(1971, 11, 17)
    mp = month_pillar(1971, 11, 17)
    dp = day_pillar(1971, 11, 17)
    hp = hour_pillar(dp.stem, 3, 28)
    print(f"  {yp} {mp} {dp} {hp}")
    print("Expected: 신해 기해 병오 경인")
