"""
Hidden stems (지장간): the sub-stems carried inside each earthly branch.

Each branch holds an ordered list of stems, each active for a number of
days within the branch's month and tagged with its sub-period. The
principal (정기) stem is always last.
"""

from dataclasses import dataclass
from enum import Enum

from saju.elements import EarthlyBranch, HeavenlyStem, HEAVENLY_STEMS


class SubPeriod(Enum):
    EARLY = "early"          # 여기
    MIDDLE = "middle"        # 중기
    PRINCIPAL = "principal"  # 정기


SUB_PERIOD_KO = {
    SubPeriod.EARLY: "여기",
    SubPeriod.MIDDLE: "중기",
    SubPeriod.PRINCIPAL: "정기",
}


@dataclass(frozen=True)
class HiddenStem:
    stem: HeavenlyStem
    days: int
    period: SubPeriod

    def to_dict(self):
        return {
            **self.stem.to_dict(),
            "days": self.days,
            "period": self.period.value,
            "period_ko": SUB_PERIOD_KO[self.period],
        }


def _entries(*rows: tuple[int, int, SubPeriod]) -> tuple[HiddenStem, ...]:
    return tuple(HiddenStem(HEAVENLY_STEMS[idx], days, period) for idx, days, period in rows)


E, M, P = SubPeriod.EARLY, SubPeriod.MIDDLE, SubPeriod.PRINCIPAL

# Indexed by branch index; (stem index, days, sub-period)
HIDDEN_STEMS = (
    _entries((8, 10, E), (9, 20, P)),              # 子: 壬 癸
    _entries((9, 9, E), (7, 3, M), (5, 18, P)),    # 丑: 癸 辛 己
    _entries((4, 7, E), (2, 7, M), (0, 16, P)),    # 寅: 戊 丙 甲
    _entries((0, 10, E), (1, 20, P)),              # 卯: 甲 乙
    _entries((1, 9, E), (9, 3, M), (4, 18, P)),    # 辰: 乙 癸 戊
    _entries((4, 7, E), (6, 7, M), (2, 16, P)),    # 巳: 戊 庚 丙
    _entries((2, 10, E), (5, 9, M), (3, 11, P)),   # 午: 丙 己 丁
    _entries((3, 9, E), (1, 3, M), (5, 18, P)),    # 未: 丁 乙 己
    _entries((5, 7, E), (8, 7, M), (6, 16, P)),    # 申: 己 壬 庚
    _entries((6, 10, E), (7, 20, P)),              # 酉: 庚 辛
    _entries((7, 9, E), (3, 3, M), (4, 18, P)),    # 戌: 辛 丁 戊
    _entries((4, 7, E), (0, 7, M), (8, 16, P)),    # 亥: 戊 甲 壬
)

del E, M, P


def hidden_stems_for(branch: EarthlyBranch) -> tuple[HiddenStem, ...]:
    """Ordered hidden stems of a branch, independent of the pillar holding it."""
    return HIDDEN_STEMS[branch.index]


def principal_stem(branch: EarthlyBranch) -> HeavenlyStem:
    return HIDDEN_STEMS[branch.index][-1].stem
