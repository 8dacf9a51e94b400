"""
Saju chart computation: birth moment in, Four Pillars out.

This is the main entry point. It ties together lunar conversion, birth
time correction, the four pillar calculators and the five element
balance, and produces one SajuResult per birth moment.

Usage from Python:
    from manse.chart import BirthMoment, compute_saju
    result = compute_saju(BirthMoment(1971, 11, 17, 4, 0))
    result.pillars.full_text()   # "신해 기해 병오 경인"
    result.to_dict()             # JSON-ready record

Design principle: the computation is pure. The same BirthMoment and
options always produce an identical result; callers may memoize on
them freely.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from manse.clock import SEOUL_LONGITUDE, TimeCorrection, correct_birth_time
from manse.elements import BalanceMode, FiveElementBalance, element_balance
from manse.errors import InvalidDateError
from manse.ganji import GanJi
from manse.lunar import lunar_to_solar
from manse.pillars import (
    check_supported_year, day_pillar, hour_pillar, month_pillar, year_pillar,
)
from manse.saju_calendar import validate_date, validate_time

logger = logging.getLogger(__name__)

LunarConverter = Callable[[int, int, int, bool], date]

PILLAR_NAMES = ("year", "month", "day", "time")
_PILLAR_SUFFIXES = {"year": "년", "month": "월", "day": "일", "time": "시"}


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class BirthMoment:
    """Birth date and wall-clock time as recorded (solar or lunar date)."""
    year: int
    month: int
    day: int
    hour: int
    minute: int = 0
    is_lunar: bool = False
    is_leap_month: bool = False

    @classmethod
    def parse(cls, birth_date: str, birth_time: str,
              is_lunar: bool = False, is_leap_month: bool = False) -> "BirthMoment":
        """
        Build from "YYYY-MM-DD" and "HH:MM" strings.

        Raises:
            InvalidDateError: malformed strings
        """
        try:
            year, month, day = (int(part) for part in birth_date.split("-"))
            hour, minute = (int(part) for part in birth_time.split(":"))
        except ValueError:
            raise InvalidDateError(
                f"Expected YYYY-MM-DD and HH:MM, got {birth_date!r} {birth_time!r}"
            ) from None
        return cls(year, month, day, hour, minute, is_lunar, is_leap_month)


@dataclass(frozen=True)
class FourPillars:
    year: GanJi
    month: GanJi
    day: GanJi
    time: GanJi

    def as_tuple(self) -> tuple:
        return (self.year, self.month, self.day, self.time)

    def tokens(self) -> list[str]:
        """The 8 characters: year stem, year branch, ... hour branch."""
        return [c for p in self.as_tuple() for c in (p.gan, p.ji)]

    def full_text(self) -> str:
        return " ".join(p.text for p in self.as_tuple())

    def hanja_text(self) -> str:
        return " ".join(p.hanja for p in self.as_tuple())


@dataclass(frozen=True)
class SajuResult:
    moment: BirthMoment
    solar_date: date
    pillars: FourPillars
    balance: FiveElementBalance
    corrections: TimeCorrection

    @property
    def full_saju(self) -> str:
        return self.pillars.full_text()

    def to_dict(self) -> dict:
        pillars = dict(zip(PILLAR_NAMES, self.pillars.as_tuple()))
        return {
            **{name: p.to_dict() for name, p in pillars.items()},
            "fullSaju": self.pillars.full_text(),
            "ohHaengBalance": self.balance.to_dict(),
            "sajuText": {name: p.text + _PILLAR_SUFFIXES[name] for name, p in pillars.items()},
            "hanja": self.pillars.hanja_text(),
            "solarDate": self.solar_date.isoformat(),
            "corrections": self.corrections.to_dict(),
        }


# ============================================================
# FULL CHART COMPUTATION
# ============================================================

def compute_four_pillars(effective: datetime, night_rat_next_day: bool = True) -> FourPillars:
    """
    Compute the four pillars for an already-corrected moment.

    Args:
        effective: corrected (standard or LMT) birth moment
        night_rat_next_day: 23:00-23:59 takes its hour stem from the next
            day, whose Rat hour it opens; the day pillar is unchanged

    Returns:
        FourPillars
    """
    y, m, d = effective.year, effective.month, effective.day

    yp = year_pillar(y, m, d)
    mp = month_pillar(y, m, d)
    dp = day_pillar(y, m, d)

    stem_day = dp
    if night_rat_next_day and effective.hour == 23:
        following = effective.date() + timedelta(days=1)
        stem_day = day_pillar(following.year, following.month, following.day)
    hp = hour_pillar(stem_day.stem, effective.hour, effective.minute)

    return FourPillars(year=yp, month=mp, day=dp, time=hp)


def compute_saju(moment: BirthMoment, *,
                 longitude: Optional[float] = SEOUL_LONGITUDE,
                 dst: Optional[bool] = None,
                 night_rat_next_day: bool = True,
                 balance_mode: BalanceMode = BalanceMode.PERCENT,
                 lunar_converter: LunarConverter = lunar_to_solar) -> SajuResult:
    """
    Compute a full Saju chart from a birth moment.

    Args:
        moment: recorded birth date and wall-clock time
        longitude: birth longitude for LMT correction (Seoul by default);
            None uses standard time as-is
        dst: None detects historical DST, True/False overrides it
        night_rat_next_day: see compute_four_pillars
        balance_mode: representation of ohHaengBalance
        lunar_converter: (year, month, day, is_leap_month) → solar date

    Returns:
        SajuResult

    Raises:
        InvalidDateError, UnsupportedYearError, LunarConversionError
    """
    check_supported_year(moment.year)
    validate_time(moment.hour, moment.minute)
    if moment.is_leap_month and not moment.is_lunar:
        raise InvalidDateError("is_leap_month only applies to lunar dates")

    if moment.is_lunar:
        solar = lunar_converter(moment.year, moment.month, moment.day, moment.is_leap_month)
        check_supported_year(solar.year)
    else:
        validate_date(moment.year, moment.month, moment.day)
        solar = date(moment.year, moment.month, moment.day)

    wall = datetime(solar.year, solar.month, solar.day, moment.hour, moment.minute)
    correction = correct_birth_time(wall, longitude=longitude, dst=dst)

    pillars = compute_four_pillars(correction.effective, night_rat_next_day=night_rat_next_day)
    balance = element_balance(pillars, balance_mode)

    logger.debug("%s → %s", moment, pillars.full_text())
    return SajuResult(
        moment=moment,
        solar_date=solar,
        pillars=pillars,
        balance=balance,
        corrections=correction,
    )


def calculate(year: int, month: int, day: int, hour: int, minute: int = 0,
              is_lunar: bool = False, is_leap_month: bool = False, **options) -> dict:
    """
    Flat-argument wrapper returning the JSON-ready record.

    Keyword options are passed through to compute_saju().
    """
    moment = BirthMoment(year, month, day, hour, minute, is_lunar, is_leap_month)
    return compute_saju(moment, **options).to_dict()


if __name__ == "__main__":
    print("=" * 60)
    print("Saju Computation Test")
    print("=" * 60)

    for moment, expected in [
        (BirthMoment(1971, 11, 17, 4, 0), "신해 기해 병오 경인"),
        (BirthMoment(1988, 9, 18, 20, 0), "무진 신유 병자 정유"),
    ]:
        result = compute_saju(moment)
        ok = result.full_saju == expected
        print(f"{moment.year}-{moment.month:02d}-{moment.day:02d} "
              f"{moment.hour:02d}:{moment.minute:02d} → {result.full_saju} "
              f"(expected {expected}) {'✓' if ok else '✗'}")
