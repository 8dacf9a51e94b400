"""
Five element (오행) balance of a Four Pillars chart.

Each of the 8 characters (4 stems, 4 branches) carries exactly one
element. The balance is either a raw count (total 8) or a percentage
(total 100.0); FiveElementBalance records which one it holds so the two
are never mixed up.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from manse.ganji import (
    BRANCH_BY_KOREAN, EarthlyBranch, Element, GanJi, HeavenlyStem, STEM_BY_KOREAN,
)

TOKENS_PER_CHART = 8
PERCENT_TOTAL = 100.0


class BalanceMode(Enum):
    COUNT = "count"
    PERCENT = "percent"


@dataclass(frozen=True)
class FiveElementBalance:
    mode: BalanceMode
    weights: Mapping[str, Union[int, float]]

    @property
    def total(self):
        return sum(self.weights.values())

    def __getitem__(self, element: Union[Element, str]):
        key = element.value if isinstance(element, Element) else element
        return self.weights[key]

    def __hash__(self):
        return hash((self.mode, tuple(self.weights.items())))

    def to_dict(self) -> dict:
        return dict(self.weights)


def element_of(token: Union[HeavenlyStem, EarthlyBranch, str], is_stem: bool = True) -> Element:
    """
    Element of a stem or branch.

    Korean names are ambiguous for 신 (辛 metal stem / 申 metal branch),
    so plain strings are looked up as stems unless is_stem is False.
    """
    if isinstance(token, (HeavenlyStem, EarthlyBranch)):
        return token.element
    table = STEM_BY_KOREAN if is_stem else BRANCH_BY_KOREAN
    if token not in table:
        kind = "stem" if is_stem else "branch"
        raise ValueError(f"Unknown {kind}: {token!r}")
    return table[token].element


def _pillar_list(pillars) -> list:
    if hasattr(pillars, "as_tuple"):
        return list(pillars.as_tuple())
    return list(pillars)


def _count(pillars: Iterable[GanJi]) -> dict:
    counts = {e.value: 0 for e in Element}
    for pillar in pillars:
        counts[pillar.stem.element.value] += 1
        counts[pillar.branch.element.value] += 1
    return counts


def element_counts(pillars) -> FiveElementBalance:
    """
    Raw per-element counts over the 8 characters.

    Args:
        pillars: FourPillars or an iterable of 4 GanJi
    """
    counts = _count(_pillar_list(pillars))
    return FiveElementBalance(BalanceMode.COUNT, MappingProxyType(counts))


def element_percentages(pillars) -> FiveElementBalance:
    """
    Percentage distribution over the 8 characters.

    Each character is worth exactly 12.5%, so no rounding is involved
    and the total is always 100.0.
    """
    share = PERCENT_TOTAL / TOKENS_PER_CHART
    counts = _count(_pillar_list(pillars))
    percents = {element: count * share for element, count in counts.items()}
    return FiveElementBalance(BalanceMode.PERCENT, MappingProxyType(percents))


def element_balance(pillars, mode: BalanceMode) -> FiveElementBalance:
    if mode is BalanceMode.COUNT:
        return element_counts(pillars)
    if mode is BalanceMode.PERCENT:
        return element_percentages(pillars)
    raise ValueError(f"Unknown balance mode: {mode!r}")


def dominant_elements(balance: FiveElementBalance) -> list[str]:
    """Elements sharing the highest weight, in 목화토금수 order."""
    top = max(balance.weights.values())
    return [e for e, w in balance.weights.items() if w == top]


def missing_elements(balance: FiveElementBalance) -> list[str]:
    return [e for e, w in balance.weights.items() if w == 0]
