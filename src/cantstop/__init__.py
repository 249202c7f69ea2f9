"""
Lane odds for the dice game "Can't Stop".

Building blocks of the Monte Carlo simulation: lane configurations and the
two-out-of-four dice matcher, a per-worker dice roller, and a streaming
statistics accumulator.
"""

from .dice import DiceRoller, config_seed
from .lanes import CONFIGS, LaneConfig, lanes, pair_sums, parse_lanes
from .running_stats import RunningStats

__all__ = [
    "CONFIGS",
    "DiceRoller",
    "LaneConfig",
    "RunningStats",
    "config_seed",
    "lanes",
    "pair_sums",
    "parse_lanes",
]
