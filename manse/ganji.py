"""
Heavenly stems, earthly branches and the sexagenary (60갑자) cycle.

Handles:
- Stem / branch definitions with element and polarity
- The 60-entry cycle table and modulo-60 index arithmetic
- Parsing pillar text ("신해", "辛亥") back into a valid pair

Only the 60 combinations where stem and branch share parity exist.
A GanJi can therefore only be obtained from the cycle table, never
assembled from an arbitrary stem and branch.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


# ============================================================
# FUNDAMENTAL DATA STRUCTURES
# ============================================================

class Polarity(Enum):
    YANG = "양"
    YIN = "음"


class Element(Enum):
    WOOD = "목"
    FIRE = "화"
    EARTH = "토"
    METAL = "금"
    WATER = "수"


@dataclass(frozen=True)
class HeavenlyStem:
    korean: str
    hanja: str
    element: Element
    polarity: Polarity
    index: int  # 0-9 in the cycle

    def __str__(self):
        return self.korean


@dataclass(frozen=True)
class EarthlyBranch:
    korean: str
    hanja: str
    animal: str
    element: Element  # primary/season element
    polarity: Polarity
    index: int  # 0-11 in the cycle

    def __str__(self):
        return self.korean


@dataclass(frozen=True)
class GanJi:
    """One stem-branch pair of the sexagenary cycle."""
    stem: HeavenlyStem
    branch: EarthlyBranch
    index: int  # 0-59 in the cycle

    @property
    def gan(self) -> str:
        return self.stem.korean

    @property
    def ji(self) -> str:
        return self.branch.korean

    @property
    def text(self) -> str:
        return self.stem.korean + self.branch.korean

    @property
    def hanja(self) -> str:
        return self.stem.hanja + self.branch.hanja

    def __str__(self):
        return self.text

    def to_dict(self) -> dict:
        return {"gan": self.gan, "ji": self.ji}


# ============================================================
# STEM AND BRANCH DEFINITIONS
# ============================================================

HEAVENLY_STEMS = (
    HeavenlyStem("갑", "甲", Element.WOOD, Polarity.YANG, 0),
    HeavenlyStem("을", "乙", Element.WOOD, Polarity.YIN, 1),
    HeavenlyStem("병", "丙", Element.FIRE, Polarity.YANG, 2),
    HeavenlyStem("정", "丁", Element.FIRE, Polarity.YIN, 3),
    HeavenlyStem("무", "戊", Element.EARTH, Polarity.YANG, 4),
    HeavenlyStem("기", "己", Element.EARTH, Polarity.YIN, 5),
    HeavenlyStem("경", "庚", Element.METAL, Polarity.YANG, 6),
    HeavenlyStem("신", "辛", Element.METAL, Polarity.YIN, 7),
    HeavenlyStem("임", "壬", Element.WATER, Polarity.YANG, 8),
    HeavenlyStem("계", "癸", Element.WATER, Polarity.YIN, 9),
)

EARTHLY_BRANCHES = (
    EarthlyBranch("자", "子", "Rat", Element.WATER, Polarity.YANG, 0),
    EarthlyBranch("축", "丑", "Ox", Element.EARTH, Polarity.YIN, 1),
    EarthlyBranch("인", "寅", "Tiger", Element.WOOD, Polarity.YANG, 2),
    EarthlyBranch("묘", "卯", "Rabbit", Element.WOOD, Polarity.YIN, 3),
    EarthlyBranch("진", "辰", "Dragon", Element.EARTH, Polarity.YANG, 4),
    EarthlyBranch("사", "巳", "Snake", Element.FIRE, Polarity.YIN, 5),
    EarthlyBranch("오", "午", "Horse", Element.FIRE, Polarity.YANG, 6),
    EarthlyBranch("미", "未", "Goat", Element.EARTH, Polarity.YIN, 7),
    EarthlyBranch("신", "申", "Monkey", Element.METAL, Polarity.YANG, 8),
    EarthlyBranch("유", "酉", "Rooster", Element.METAL, Polarity.YIN, 9),
    EarthlyBranch("술", "戌", "Dog", Element.EARTH, Polarity.YANG, 10),
    EarthlyBranch("해", "亥", "Pig", Element.WATER, Polarity.YIN, 11),
)

# Lookup helpers
STEM_BY_KOREAN = MappingProxyType({s.korean: s for s in HEAVENLY_STEMS})
STEM_BY_HANJA = MappingProxyType({s.hanja: s for s in HEAVENLY_STEMS})
BRANCH_BY_KOREAN = MappingProxyType({b.korean: b for b in EARTHLY_BRANCHES})
BRANCH_BY_HANJA = MappingProxyType({b.hanja: b for b in EARTHLY_BRANCHES})


# ============================================================
# SEXAGENARY CYCLE
# ============================================================

CYCLE_LENGTH = 60

# 갑자, 을축, 병인 ... 계해: stem and branch advance together, so entry i
# pairs stem i % 10 with branch i % 12.
SIXTY_CYCLE = tuple(
    GanJi(HEAVENLY_STEMS[i % 10], EARTHLY_BRANCHES[i % 12], i)
    for i in range(CYCLE_LENGTH)
)

_CYCLE_BY_TEXT = MappingProxyType(
    {**{g.text: g for g in SIXTY_CYCLE}, **{g.hanja: g for g in SIXTY_CYCLE}}
)


def add(index: int, delta: int) -> int:
    """Move `delta` steps along the cycle; the result is always 0-59."""
    return (index + delta) % CYCLE_LENGTH


def pair_at(index: int) -> GanJi:
    """Return the pair at a cycle position (reduced modulo 60)."""
    return SIXTY_CYCLE[index % CYCLE_LENGTH]


def index_of(pair: GanJi) -> int:
    return pair.index


def pair_of(stem_index: int, branch_index: int) -> GanJi:
    """
    Return the pair for a stem and branch index.

    Raises:
        ValueError: if stem and branch differ in parity (e.g. 갑축),
            which never occurs in the cycle.
    """
    if stem_index % 2 != branch_index % 2:
        stem = HEAVENLY_STEMS[stem_index % 10]
        branch = EARTHLY_BRANCHES[branch_index % 12]
        raise ValueError(f"{stem.korean}{branch.korean} is not part of the sexagenary cycle")
    # Chinese remainder: the unique i in 0-59 with i = stem (mod 10), i = branch (mod 12)
    for i in range(stem_index % 10, CYCLE_LENGTH, 10):
        if i % 12 == branch_index % 12:
            return SIXTY_CYCLE[i]
    raise AssertionError("unreachable")


def parse_ganji(text: str) -> GanJi:
    """
    Parse pillar text in Korean ("신해") or hanja ("辛亥").

    Raises:
        ValueError: unknown characters or a non-cycle combination.
    """
    pair = _CYCLE_BY_TEXT.get(text.strip())
    if pair is None:
        raise ValueError(f"Not a sexagenary pair: {text!r}")
    return pair


if __name__ == "__main__":
    for row in range(6):
        print(" ".join(pair_at(row * 10 + col).text for col in range(10)))
