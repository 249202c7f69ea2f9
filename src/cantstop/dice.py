import random
from typing import Optional, Union

from .lanes import Dice, LaneConfig


SeedLike = Union[int, str, None]


class DiceRoller:
    """
    Rolls four six-sided dice from a private random source.

    Every worker owns its own roller, so no two simulated configurations
    share a generator and a fixed seed reproduces the same roll sequence
    no matter how many other configurations run alongside.
    """

    def __init__(self, seed: SeedLike = None):
        self._rng = random.Random(seed)

    def roll(self) -> Dice:
        rng = self._rng
        return (
            rng.randint(1, 6),
            rng.randint(1, 6),
            rng.randint(1, 6),
            rng.randint(1, 6),
        )


def config_seed(seed: Optional[int], config: LaneConfig) -> Optional[str]:
    """
    Derive a per-configuration seed from a master seed and the lanes.

    String seeds are hashed by random.Random itself (not by hash()), so the
    derived stream is stable across processes and interpreter runs.
    Returns None for a master seed of None (seed from OS entropy).
    """
    if seed is None:
        return None
    return f"{seed}:{config.key}"
