"""
Korean clock-time history for birth time correction.

Handles:
- Gazetted daylight saving (서머타임) periods, 1948-1988
- Standard time meridian changes (+8:30 / +9:00 eras)
- Wall clock → standard time → local mean time

A birth certificate records wall-clock time. Saju hours follow the Sun,
so the clock reading is first stripped of DST and then shifted by the
distance between the birth longitude and the meridian the clock was set
to at the time.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from manse.saju_calendar import apply_lmt, lmt_correction

logger = logging.getLogger(__name__)

SEOUL_LONGITUDE = 127.0

DST_SHIFT = timedelta(hours=1)


# ============================================================
# DAYLIGHT SAVING TIME
# ============================================================

@dataclass(frozen=True)
class DaylightSavingPeriod:
    """
    One gazetted DST period in wall-clock time, half-open [start, end).

    `end` is the wall-clock reading at which clocks were set back. The
    hour before it happened twice; it is read as DST time.
    """
    start: datetime
    end: datetime

    def __contains__(self, wall: datetime) -> bool:
        return self.start <= wall < self.end


# 1948-1960: clocks moved at midnight; 1987-1988: 02:00 forward, 03:00 back.
KOREAN_DST_PERIODS = (
    DaylightSavingPeriod(datetime(1948, 6, 1), datetime(1948, 9, 13)),
    DaylightSavingPeriod(datetime(1949, 4, 3), datetime(1949, 9, 11)),
    DaylightSavingPeriod(datetime(1950, 4, 1), datetime(1950, 9, 10)),
    DaylightSavingPeriod(datetime(1951, 5, 6), datetime(1951, 9, 9)),
    DaylightSavingPeriod(datetime(1955, 5, 5), datetime(1955, 9, 9)),
    DaylightSavingPeriod(datetime(1956, 5, 20), datetime(1956, 9, 30)),
    DaylightSavingPeriod(datetime(1957, 5, 5), datetime(1957, 9, 22)),
    DaylightSavingPeriod(datetime(1958, 5, 4), datetime(1958, 9, 21)),
    DaylightSavingPeriod(datetime(1959, 5, 3), datetime(1959, 9, 20)),
    DaylightSavingPeriod(datetime(1960, 5, 1), datetime(1960, 9, 18)),
    DaylightSavingPeriod(datetime(1987, 5, 10, 2), datetime(1987, 10, 11, 3)),
    DaylightSavingPeriod(datetime(1988, 5, 8, 2), datetime(1988, 10, 9, 3)),
)

_DST_STARTS = tuple(p.start for p in KOREAN_DST_PERIODS)


def dst_period_for(wall: datetime) -> Optional[DaylightSavingPeriod]:
    """Return the DST period containing a wall-clock moment, if any."""
    i = bisect_right(_DST_STARTS, wall) - 1
    if i >= 0 and wall in KOREAN_DST_PERIODS[i]:
        return KOREAN_DST_PERIODS[i]
    return None


def is_dst(wall: datetime) -> bool:
    return dst_period_for(wall) is not None


def dst_offset(wall: datetime) -> timedelta:
    return DST_SHIFT if is_dst(wall) else timedelta(0)


def remove_dst(wall: datetime) -> datetime:
    """Wall clock → standard time. Outside DST periods the time is unchanged."""
    return wall - dst_offset(wall)


# ============================================================
# STANDARD TIME MERIDIAN
# ============================================================
#
# Korean standard time history (tz database, Asia/Seoul):
#   until 1908-03-31  Seoul local mean time, UTC+8:27:52
#   1908-04-01        UTC+8:30 (127.5°E)
#   1912-01-01        UTC+9:00 (135°E)
#   1954-03-21        UTC+8:30 (127.5°E)
#   1961-08-10        UTC+9:00 (135°E)

KOREA_TZ = ZoneInfo("Asia/Seoul")


def standard_utc_offset_at(standard_time: datetime) -> timedelta:
    """
    The zone's standard (non-DST) UTC offset at a given moment.

    Clock offset minus the DST adjustment, read from the tz database.
    """
    local_dt = standard_time.replace(tzinfo=KOREA_TZ)
    dst_seconds = local_dt.dst()
    if dst_seconds:
        return local_dt.utcoffset() - dst_seconds
    return local_dt.utcoffset()


def standard_meridian_at(standard_time: datetime) -> float:
    """Longitude (°E) the Korean clock was set to at a given standard time."""
    offset_hours = standard_utc_offset_at(standard_time).total_seconds() / 3600
    return offset_hours * 15.0


# ============================================================
# BIRTH TIME CORRECTION
# ============================================================

@dataclass(frozen=True)
class TimeCorrection:
    wall: datetime
    standard: datetime
    effective: datetime
    dst_applied: bool
    lmt_minutes: float

    def to_dict(self) -> dict:
        return {
            "summerTimeApplied": self.dst_applied,
            "lmtMinutes": round(self.lmt_minutes, 2),
            "effectiveTime": self.effective.strftime("%Y-%m-%dT%H:%M"),
        }


def correct_birth_time(wall: datetime,
                       longitude: Optional[float] = SEOUL_LONGITUDE,
                       dst: Optional[bool] = None) -> TimeCorrection:
    """
    Convert a Korean wall-clock birth time to the time used for pillars.

    Args:
        wall: wall-clock birth time as recorded
        longitude: birth longitude (east positive) for LMT correction;
            None keeps standard time
        dst: None detects DST from the gazetted table, True forces the
            one-hour correction, False never applies it

    Returns:
        TimeCorrection with the standard and effective (LMT) moments
    """
    if dst is None:
        standard = remove_dst(wall)
    else:
        standard = wall - DST_SHIFT if dst else wall
    dst_applied = standard != wall

    if longitude is None:
        lmt_minutes = 0.0
        effective = standard
    else:
        meridian = standard_meridian_at(standard)
        lmt_minutes = lmt_correction(longitude, meridian)
        effective = apply_lmt(standard, longitude, meridian)

    logger.debug("birth time %s → standard %s (dst=%s) → effective %s (%+.1f min)",
                 wall, standard, dst_applied, effective, lmt_minutes)

    return TimeCorrection(
        wall=wall,
        standard=standard,
        effective=effective,
        dst_applied=dst_applied,
        lmt_minutes=lmt_minutes,
    )
