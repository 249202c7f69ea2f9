# simulations/trials.py

from __future__ import annotations

import logging
from typing import Optional

from .common import ConfigResult, HISTOGRAM_WIDTH, Timer, format_stats_line

from cantstop.dice import DiceRoller, config_seed
from cantstop.lanes import LaneConfig
from cantstop.running_stats import RunningStats


logger = logging.getLogger(__name__)


def run_trial(config: LaneConfig, roller: DiceRoller) -> int:
    """
    Play one turn: keep rolling while some pair of dice hits a lane.
    Returns the number of successful rolls before the first miss.
    """
    tries = 0
    while config.matches(*roller.roll()):
        tries += 1
    return tries


def run_trials(
    config: LaneConfig,
    trials: int,
    seed: Optional[int],
    width: int = HISTOGRAM_WIDTH,
) -> ConfigResult:
    """
    Run `trials` independent turns for one lane configuration.

    The worker owns both its dice roller (seeded from the master seed and
    the lanes, or from OS entropy when seed is None) and its RunningStats;
    nothing is shared with other configurations.
    """
    if trials <= 0:
        raise ValueError("trials must be > 0")

    derived = config_seed(seed, config)
    roller = DiceRoller(derived)
    stats = RunningStats(width)

    logger.debug("start %s: trials=%d seed=%s", config, trials, derived)

    with Timer() as t:
        for _ in range(trials):
            stats.record(run_trial(config, roller))

    result = ConfigResult.from_stats(
        config,
        stats,
        seed=derived,
        runtime_s=t.elapsed_s,
    )
    logger.debug("done %s", format_stats_line(result))
    return result
