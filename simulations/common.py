# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import time

from cantstop.lanes import LaneConfig
from cantstop.running_stats import RunningStats


DEFAULT_SEED = 12
DEFAULT_TRIALS = 100_000
HISTOGRAM_WIDTH = 20

SEED_MODES = ("fixed", "random")
EXECUTORS = ("process", "thread")


@dataclass(frozen=True)
class SimulationSpec:
    """
    Run parameters shared by every configuration in a simulation.
    """
    trials: int
    seed: int = DEFAULT_SEED
    seed_mode: str = "fixed"  # fixed: reproducible, random: OS entropy
    width: int = HISTOGRAM_WIDTH
    executor: str = "process"
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if self.trials <= 0:
            raise ValueError("trials must be > 0")
        if self.width <= 0:
            raise ValueError("width must be > 0")
        if self.seed_mode not in SEED_MODES:
            raise ValueError(
                f"unknown seed mode '{self.seed_mode}'. Available: {list(SEED_MODES)}"
            )
        if self.executor not in EXECUTORS:
            raise ValueError(
                f"unknown executor '{self.executor}'. Available: {list(EXECUTORS)}"
            )
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError("max_workers must be > 0")

    @property
    def master_seed(self) -> Optional[int]:
        return self.seed if self.seed_mode == "fixed" else None


@dataclass(frozen=True)
class ConfigResult:
    """
    Finished statistics for one lane configuration.
    """
    config: LaneConfig
    trials: int
    expected: float
    sd: float
    histogram: Tuple[int, ...]
    overflow: int = 0
    max_value: int = 0
    seed: Optional[str] = None
    runtime_s: Optional[float] = None

    def __post_init__(self) -> None:
        # Sanity: every trial is either bucketed or overflowed
        actual = sum(self.histogram) + self.overflow
        if actual != self.trials:
            raise ValueError(
                f"histogram sum mismatch for {self.config}: "
                f"expected {self.trials}, got {actual}"
            )

    @classmethod
    def from_stats(
        cls,
        config: LaneConfig,
        stats: RunningStats,
        seed: Optional[str] = None,
        runtime_s: Optional[float] = None,
    ) -> "ConfigResult":
        return cls(
            config=config,
            trials=stats.n,
            expected=stats.expected(),
            sd=stats.sd(),
            histogram=tuple(stats.snapshot_histogram()),
            overflow=stats.overflow,
            max_value=stats.max_value,
            seed=seed,
            runtime_s=runtime_s,
        )


@dataclass
class SimulationResult:
    """
    All per-configuration results of a run, in catalog order.
    """
    spec: SimulationSpec
    results: List[ConfigResult]
    runtime_s: Optional[float] = None

    configs: List[LaneConfig] = field(init=False)

    def __post_init__(self) -> None:
        self.configs = [r.config for r in self.results]
        for r in self.results:
            if r.trials != self.spec.trials:
                raise ValueError(
                    f"trial count mismatch for {r.config}: "
                    f"expected {self.spec.trials}, got {r.trials}"
                )

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def get(self, config: LaneConfig) -> ConfigResult:
        for r in self.results:
            if r.config == config:
                return r
        raise KeyError(str(config))


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def max_bucket(results: List[ConfigResult]) -> int:
    """
    Largest histogram bucket across all results (shared scale for displays).
    """
    mx = 0
    for r in results:
        for h in r.histogram:
            if h > mx:
                mx = h
    return mx


def format_stats_line(r: ConfigResult) -> str:
    """
    Human-friendly one-liner for logs.
    """
    return (
        f"{r.config}: trials={r.trials}, E={r.expected:.3f}, sd={r.sd:.3f}, "
        f"max={r.max_value}, overflow={r.overflow}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
