"""
Error kinds raised by the Saju engine.

Calculators reject bad input instead of guessing. Each concrete error is
also a ValueError.
"""


class SajuError(Exception):
    """Base class for all engine errors."""


class InvalidDateError(SajuError, ValueError):
    """Impossible calendar date or clock time (e.g. Feb 30, 24:00)."""


class UnsupportedYearError(SajuError, ValueError):
    """Year outside the range the anchor and correction tables cover."""


class LunarConversionError(SajuError, ValueError):
    """The lunar calendar could not resolve a lunar date / leap-month flag."""
