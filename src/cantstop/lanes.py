from dataclasses import dataclass
from itertools import combinations
from typing import List, Sequence, Tuple


MIN_TARGET = 2
MAX_TARGET = 12

Dice = Tuple[int, int, int, int]


@dataclass(frozen=True)
class LaneConfig:
    """
    A set of lanes advanced simultaneously in one play of "Can't Stop".

    Each target is a sum of two dice. A roll of four dice advances the
    configuration if any two of the four dice add up to any one target.
    """
    targets: Tuple[int, ...]

    def __post_init__(self) -> None:
        targets = tuple(self.targets)
        if not targets:
            raise ValueError("a lane configuration needs at least one target")
        for t in targets:
            if isinstance(t, bool) or not isinstance(t, int):
                raise ValueError(f"target {t!r} is not an integer")
            if t < MIN_TARGET or t > MAX_TARGET:
                raise ValueError(
                    f"target {t} out of range [{MIN_TARGET}, {MAX_TARGET}]"
                )
        if len(set(targets)) != len(targets):
            raise ValueError(f"duplicate targets in {list(targets)}")
        object.__setattr__(self, "targets", targets)

    # ------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------

    def matches(self, d1: int, d2: int, d3: int, d4: int) -> bool:
        """
        True if a sum of two out of four dice hits one of the lanes.
        """
        for c in self.targets:
            if d1 + d2 == c:
                return True
            if d1 + d3 == c:
                return True
            if d1 + d4 == c:
                return True
            if d2 + d3 == c:
                return True
            if d2 + d4 == c:
                return True
            if d3 + d4 == c:
                return True
        return False

    # ------------------------------------------------------------
    # Identity / display
    # ------------------------------------------------------------

    @property
    def key(self) -> str:
        return "-".join(str(t) for t in self.targets)

    def __str__(self) -> str:
        return "[" + " ".join(str(t) for t in self.targets) + "]"

    def __len__(self) -> int:
        return len(self.targets)


def lanes(*targets: int) -> LaneConfig:
    return LaneConfig(tuple(targets))


def parse_lanes(text: str) -> LaneConfig:
    """
    Parse "7" or "2,3,4" into a LaneConfig.
    """
    parts = [p.strip() for p in text.split(",") if p.strip()]
    try:
        targets = tuple(int(p) for p in parts)
    except ValueError:
        raise ValueError(f"invalid lane list '{text}'") from None
    return LaneConfig(targets)


def pair_sums(dice: Sequence[int]) -> List[int]:
    """
    All six sums of two out of four dice, in combination order.
    """
    return [a + b for a, b in combinations(dice, 2)]


# Single lanes 2..12, every triple drawn from 2..7, and three triples across
# the middle and top of the board.
CONFIGS: Tuple[LaneConfig, ...] = tuple(
    LaneConfig(tuple(t))
    for t in [
        (2,), (3,), (4,), (5,), (6,), (7,), (8,), (9,), (10,), (11,), (12,),
        (2, 3, 4), (2, 3, 5), (2, 3, 6), (2, 3, 7), (2, 4, 5), (2, 4, 6),
        (2, 4, 7), (2, 5, 6), (2, 5, 7), (2, 6, 7),
        (3, 4, 5), (3, 4, 6), (3, 4, 7), (3, 5, 6), (3, 5, 7), (3, 6, 7),
        (4, 5, 6), (4, 5, 7), (4, 6, 7),
        (5, 6, 7),
        (6, 7, 8),
        (7, 8, 9),
        (10, 11, 12),
    ]
)
