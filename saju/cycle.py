"""
Sexagenary (60-step) cycle primitive.

Stems cycle every 10 steps and branches every 12. Since gcd(10, 12) = 2
only 60 of the 120 (stem, branch) pairs occur, so a pillar is stored as
a single offset and both indices are derived from it.
"""

from dataclasses import dataclass

CYCLE_LENGTH = 60
STEM_COUNT = 10
BRANCH_COUNT = 12


def from_offset(n: int) -> tuple[int, int]:
    """Return (stem_index, branch_index) for any integer offset."""
    n %= CYCLE_LENGTH
    return n % STEM_COUNT, n % BRANCH_COUNT


@dataclass(frozen=True)
class CycleOffset:
    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", self.value % CYCLE_LENGTH)

    @classmethod
    def from_indices(cls, stem_index: int, branch_index: int) -> "CycleOffset":
        """
        Recover the offset for a (stem, branch) pair.

        Solves n = stem (mod 10), n = branch (mod 12). A pair whose
        parities differ has no solution and raises ValueError.
        """
        stem_index %= STEM_COUNT
        branch_index %= BRANCH_COUNT
        if (stem_index - branch_index) % 2:
            raise ValueError(
                f"stem {stem_index} and branch {branch_index} never pair in the cycle"
            )
        return cls(6 * stem_index - 5 * branch_index)

    @property
    def stem_index(self) -> int:
        return self.value % STEM_COUNT

    @property
    def branch_index(self) -> int:
        return self.value % BRANCH_COUNT

    def shift(self, steps: int) -> "CycleOffset":
        return CycleOffset(self.value + steps)

    def __int__(self):
        return self.value
