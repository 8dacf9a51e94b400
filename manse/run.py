"""
CLI wrapper for compute_saju().

Usage:
    manse --birth-date YYYY-MM-DD --birth-time HH:MM \
        [--lunar] [--leap-month] [--longitude LON | --no-lmt] \
        [--dst auto|on|off] [--balance percent|count] \
        [--day-boundary next|same] [--verbose]
"""

import argparse
import json
import logging
import sys

from manse.chart import BirthMoment, compute_saju
from manse.clock import SEOUL_LONGITUDE
from manse.elements import BalanceMode
from manse.errors import LunarConversionError, SajuError
from manse.lunar import solar_to_lunar

_DST_CHOICES = {"auto": None, "on": True, "off": False}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute Saju Four Pillars for a birth moment.")
    parser.add_argument("--birth-date", required=True, dest="birth_date",
                        help="YYYY-MM-DD (solar unless --lunar)")
    parser.add_argument("--birth-time", required=True, dest="birth_time",
                        help="HH:MM, Korean wall-clock time")
    parser.add_argument("--lunar", action="store_true", help="birth date is a lunar date")
    parser.add_argument("--leap-month", action="store_true", dest="leap_month",
                        help="lunar date is in the leap (윤) month")
    lmt = parser.add_mutually_exclusive_group()
    lmt.add_argument("--longitude", type=float, default=SEOUL_LONGITUDE,
                     help=f"birth longitude for LMT correction (default {SEOUL_LONGITUDE})")
    lmt.add_argument("--no-lmt", action="store_true", dest="no_lmt",
                     help="use standard time without LMT correction")
    parser.add_argument("--dst", choices=list(_DST_CHOICES), default="auto",
                        help="daylight saving correction (default: detect from history)")
    parser.add_argument("--balance", choices=[m.value for m in BalanceMode],
                        default=BalanceMode.PERCENT.value)
    parser.add_argument("--day-boundary", choices=["next", "same"], default="next",
                        dest="day_boundary",
                        help="day whose stem the 23:00 Rat hour uses")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        moment = BirthMoment.parse(args.birth_date, args.birth_time,
                                   is_lunar=args.lunar, is_leap_month=args.leap_month)
        result = compute_saju(
            moment,
            longitude=None if args.no_lmt else args.longitude,
            dst=_DST_CHOICES[args.dst],
            night_rat_next_day=args.day_boundary == "next",
            balance_mode=BalanceMode(args.balance),
        )
    except SajuError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output = result.to_dict()
    try:
        output["lunarDate"] = str(solar_to_lunar(result.solar_date))
    except LunarConversionError:
        # the lunar table ends in 2050; the chart itself does not need it
        output["lunarDate"] = None

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
