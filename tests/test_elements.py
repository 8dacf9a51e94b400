"""Five element balance tests."""

from datetime import datetime, timedelta

import pytest

from manse.chart import compute_four_pillars
from manse.elements import (
    BalanceMode, dominant_elements, element_balance, element_counts, element_of,
    element_percentages, missing_elements,
)
from manse.ganji import Element, parse_ganji


class TestElementOf:
    def test_stems(self):
        assert element_of("갑") is Element.WOOD
        assert element_of("신") is Element.METAL
        assert element_of("계") is Element.WATER

    def test_branches(self):
        assert element_of("자", is_stem=False) is Element.WATER
        assert element_of("신", is_stem=False) is Element.METAL
        assert element_of("미", is_stem=False) is Element.EARTH

    def test_objects(self):
        pair = parse_ganji("병오")
        assert element_of(pair.stem) is Element.FIRE
        assert element_of(pair.branch) is Element.FIRE

    def test_unknown(self):
        with pytest.raises(ValueError):
            element_of("자")
        with pytest.raises(ValueError):
            element_of("갑", is_stem=False)


class TestBalance:
    def test_fixture_counts(self, pillars_1971):
        counts = element_counts(pillars_1971)
        assert counts.mode is BalanceMode.COUNT
        assert counts.to_dict() == {"목": 1, "화": 2, "토": 1, "금": 2, "수": 2}
        assert counts.total == 8

    def test_fixture_percentages(self, pillars_1971):
        percents = element_percentages(pillars_1971)
        assert percents.mode is BalanceMode.PERCENT
        assert percents.to_dict() == {"목": 12.5, "화": 25.0, "토": 12.5, "금": 25.0, "수": 25.0}
        assert percents.total == 100.0

    def test_lookup_by_element_or_name(self, pillars_1971):
        percents = element_percentages(pillars_1971)
        assert percents[Element.FIRE] == percents["화"] == 25.0

    def test_accepts_plain_iterable(self, pillars_1971):
        assert element_counts(list(pillars_1971.as_tuple())) == element_counts(pillars_1971)

    def test_modes_are_distinguishable(self, pillars_1971):
        counts = element_balance(pillars_1971, BalanceMode.COUNT)
        percents = element_balance(pillars_1971, BalanceMode.PERCENT)
        assert counts != percents
        assert counts.mode is not percents.mode

    def test_unknown_mode(self, pillars_1971):
        with pytest.raises(ValueError):
            element_balance(pillars_1971, "count")

    def test_totals_over_many_charts(self):
        moment = datetime(1950, 1, 1, 0, 0)
        while moment.year < 2000:
            pillars = compute_four_pillars(moment)
            assert element_counts(pillars).total == 8
            assert element_percentages(pillars).total == 100.0
            moment += timedelta(days=7, hours=5, minutes=13)

    def test_weights_are_read_only(self, pillars_1971):
        with pytest.raises(TypeError):
            element_counts(pillars_1971).weights["목"] = 3


class TestDominantAndMissing:
    def test_fixture(self, pillars_1971):
        counts = element_counts(pillars_1971)
        assert dominant_elements(counts) == ["화", "금", "수"]
        assert missing_elements(counts) == []

    def test_lopsided_chart(self):
        pillars = [parse_ganji("갑자")] * 4
        percents = element_percentages(pillars)
        assert percents.to_dict() == {"목": 50.0, "화": 0.0, "토": 0.0, "금": 0.0, "수": 50.0}
        assert dominant_elements(percents) == ["목", "수"]
        assert missing_elements(percents) == ["화", "토", "금"]
