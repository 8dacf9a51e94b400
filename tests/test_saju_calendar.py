"""Calendar utility tests: validation, JDN, solar months, LMT."""

from datetime import date, datetime

import pytest

from manse.errors import InvalidDateError
from manse.saju_calendar import (
    apply_lmt, date_range, days_in_month, is_before_lichun, is_leap_year,
    julian_day_number, lmt_correction, solar_month, solar_term, validate_date,
    validate_time,
)


class TestValidation:
    @pytest.mark.parametrize("year, expected", [(1900, False), (2000, True), (2023, False), (2024, True)])
    def test_leap_years(self, year, expected):
        assert is_leap_year(year) is expected

    def test_days_in_february(self):
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    @pytest.mark.parametrize("ymd", [(2000, 2, 29), (2024, 2, 29), (1971, 11, 17), (2100, 12, 31)])
    def test_valid_dates(self, ymd):
        validate_date(*ymd)

    @pytest.mark.parametrize("ymd", [
        (2023, 2, 29),
        (1900, 2, 29),
        (1990, 4, 31),
        (2024, 2, 30),
        (2024, 13, 1),
        (2024, 0, 10),
        (2024, 1, 0),
    ])
    def test_invalid_dates(self, ymd):
        with pytest.raises(InvalidDateError):
            validate_date(*ymd)

    def test_invalid_date_is_value_error(self):
        with pytest.raises(ValueError):
            validate_date(2023, 2, 29)

    @pytest.mark.parametrize("hm", [(24, 0), (-1, 0), (12, 60), (12, -1)])
    def test_invalid_times(self, hm):
        with pytest.raises(InvalidDateError):
            validate_time(*hm)


class TestJulianDayNumber:
    @pytest.mark.parametrize("ymd, jdn", [
        ((2000, 1, 1), 2451545),
        ((1949, 10, 1), 2433191),
        ((1970, 1, 1), 2440588),
        ((1900, 1, 1), 2415021),
        ((1582, 10, 15), 2299161),
    ])
    def test_known_values(self, ymd, jdn):
        assert julian_day_number(*ymd) == jdn

    @pytest.mark.parametrize("before, after", [
        ((1900, 2, 28), (1900, 3, 1)),
        ((2000, 2, 28), (2000, 2, 29)),
        ((2000, 2, 29), (2000, 3, 1)),
        ((1999, 12, 31), (2000, 1, 1)),
    ])
    def test_consecutive_dates(self, before, after):
        assert julian_day_number(*after) - julian_day_number(*before) == 1

    def test_matches_date_ordinal(self):
        offset = julian_day_number(1, 1, 1) - date(1, 1, 1).toordinal()
        for d in date_range("1900-01-01", "1900-12-31"):
            assert julian_day_number(d.year, d.month, d.day) == d.toordinal() + offset

    @pytest.mark.parametrize("ymd", [(1900, 1, 1), (1949, 10, 1), (1971, 11, 17), (1988, 9, 18), (2100, 12, 31)])
    def test_ordinal_offset(self, ymd):
        # JDN of 0001-01-01 is 1721426, ordinal 1
        assert julian_day_number(*ymd) == date(*ymd).toordinal() + 1721425


class TestSolarMonth:
    @pytest.mark.parametrize("month, day, expected", [
        (1, 1, 11),
        (1, 5, 11),
        (1, 6, 12),
        (2, 3, 12),
        (2, 4, 1),
        (3, 5, 1),
        (3, 6, 2),
        (4, 4, 2),
        (4, 5, 3),
        (5, 5, 3),
        (5, 6, 4),
        (6, 5, 4),
        (6, 6, 5),
        (7, 6, 5),
        (7, 7, 6),
        (8, 7, 6),
        (8, 8, 7),
        (9, 7, 7),
        (9, 8, 8),
        (10, 7, 8),
        (10, 8, 9),
        (11, 6, 9),
        (11, 7, 10),
        (11, 17, 10),
        (12, 6, 10),
        (12, 7, 11),
        (12, 31, 11),
    ])
    def test_boundaries(self, month, day, expected):
        assert solar_month(month, day) == expected

    def test_saju_year_is_monotonic(self):
        months = [solar_month(d.month, d.day) for d in date_range("2021-02-04", "2022-02-03")]
        assert months == sorted(months)
        assert set(months) == set(range(1, 13))

    def test_feb_29(self):
        assert solar_month(2, 29) == 1

    @pytest.mark.parametrize("month, day", [(13, 1), (0, 1), (2, 30), (4, 31), (1, 0)])
    def test_rejects_invalid(self, month, day):
        with pytest.raises(InvalidDateError):
            solar_month(month, day)

    @pytest.mark.parametrize("month, day, name", [
        (2, 3, "소한"),
        (2, 4, "입춘"),
        (1, 5, "대설"),
        (11, 17, "입동"),
        (9, 18, "백로"),
    ])
    def test_solar_term(self, month, day, name):
        assert solar_term(month, day) == name

    def test_lichun(self):
        assert is_before_lichun(1, 31)
        assert is_before_lichun(2, 3)
        assert not is_before_lichun(2, 4)
        assert not is_before_lichun(12, 31)


class TestLMT:
    def test_seoul(self):
        assert lmt_correction(127.0) == -32.0

    def test_on_meridian(self):
        assert lmt_correction(127.5, 127.5) == 0.0

    def test_east_of_meridian(self):
        assert lmt_correction(136.0) == 4.0

    def test_apply(self):
        assert apply_lmt(datetime(1971, 11, 17, 4, 0), 127.0) == datetime(1971, 11, 17, 3, 28)

    def test_apply_crosses_midnight(self):
        assert apply_lmt(datetime(2000, 1, 2, 0, 10), 127.0) == datetime(2000, 1, 1, 23, 38)


class TestDateRange:
    def test_inclusive(self):
        days = list(date_range("2024-02-27", "2024-03-01"))
        assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]

    def test_empty_when_reversed(self):
        assert list(date_range(date(2024, 3, 1), date(2024, 2, 1))) == []
