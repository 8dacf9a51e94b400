"""Shared fixtures for the Saju engine tests."""

import pytest

from manse.chart import BirthMoment, FourPillars
from manse.ganji import parse_ganji


@pytest.fixture
def moment_1971() -> BirthMoment:
    """1971-11-17 04:00 solar: 신해 기해 병오 경인."""
    return BirthMoment(1971, 11, 17, 4, 0)


@pytest.fixture
def moment_1988_dst() -> BirthMoment:
    """1988-09-18 20:00 solar, inside the 1988 daylight saving period."""
    return BirthMoment(1988, 9, 18, 20, 0)


@pytest.fixture
def pillars_1971() -> FourPillars:
    return FourPillars(*(parse_ganji(t) for t in ("신해", "기해", "병오", "경인")))
