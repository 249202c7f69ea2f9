# simulations/run.py

from __future__ import annotations

import logging
import os
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Optional, Sequence

from .common import (
    ConfigResult,
    DEFAULT_SEED,
    HISTOGRAM_WIDTH,
    SimulationResult,
    SimulationSpec,
    Timer,
)
from .trials import run_trials

from cantstop.lanes import CONFIGS, LaneConfig


logger = logging.getLogger(__name__)


def _make_executor(spec: SimulationSpec, n_configs: int) -> Executor:
    workers = spec.max_workers
    if spec.executor == "thread":
        return ThreadPoolExecutor(max_workers=workers or n_configs)
    if workers is None:
        workers = min(n_configs, os.cpu_count() or 1)
    return ProcessPoolExecutor(max_workers=workers)


def run_simulation(
    trials: int,
    configs: Sequence[LaneConfig] = CONFIGS,
    seed: int = DEFAULT_SEED,
    seed_mode: str = "fixed",
    width: int = HISTOGRAM_WIDTH,
    executor: str = "process",
    max_workers: Optional[int] = None,
) -> SimulationResult:
    """
    Simulate every lane configuration concurrently and return all results.

    Parameters
    ----------
    trials:
        Number of turns played per configuration.
    configs:
        Lane configurations to evaluate (defaults to the full catalog).
    seed:
        Master seed; each configuration derives its own seed from it.
    seed_mode:
        'fixed' for reproducible runs, 'random' to seed from OS entropy.
    width:
        Histogram width (outcomes 0 .. width-1 are bucketed).
    executor:
        'process' (parallel across cores) or 'thread'.
    max_workers:
        Pool size; defaults to one worker per configuration, capped at the
        CPU count for processes.

    Returns
    -------
    SimulationResult
        Results in the order of `configs`. Nothing is returned until every
        configuration has finished; the first worker failure is re-raised.
    """
    spec = SimulationSpec(
        trials=trials,
        seed=seed,
        seed_mode=seed_mode,
        width=width,
        executor=executor,
        max_workers=max_workers,
    )
    configs = list(configs)
    if not configs:
        raise ValueError("configs must be non-empty")
    return run_spec(spec, configs)


def run_spec(spec: SimulationSpec, configs: Sequence[LaneConfig]) -> SimulationResult:
    logger.info(
        "running %d configurations x %d trials (executor=%s, seed_mode=%s)",
        len(configs), spec.trials, spec.executor, spec.seed_mode,
    )

    # One slot per configuration, filled in catalog order
    results: List[Optional[ConfigResult]] = [None] * len(configs)

    with Timer() as t:
        with _make_executor(spec, len(configs)) as pool:
            futures: List[Future] = [
                pool.submit(run_trials, cnf, spec.trials, spec.master_seed, spec.width)
                for cnf in configs
            ]
            for i, fut in enumerate(futures):
                try:
                    results[i] = fut.result()
                except Exception:
                    logger.exception("simulation of %s failed", configs[i])
                    for other in futures[i + 1:]:
                        other.cancel()
                    raise

    logger.info("finished %d configurations in %.3fs", len(configs), t.elapsed_s)

    return SimulationResult(
        spec=spec,
        results=[r for r in results if r is not None],
        runtime_s=t.elapsed_s,
    )


def run_config(
    config: LaneConfig,
    trials: int,
    seed: Optional[int] = DEFAULT_SEED,
    width: int = HISTOGRAM_WIDTH,
) -> ConfigResult:
    """
    Convenience helper: simulate one configuration in the calling thread.
    """
    return run_trials(config, trials, seed, width)
