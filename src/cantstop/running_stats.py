import math
from typing import List


class RunningStats:
    """
    RunningStats (streaming accumulator)

    Collects the outcome of every trial for one lane configuration without
    keeping the outcomes themselves. For each recorded value it updates:

      - the trial count n
      - the cumulative sum, giving E = sum / n
      - Welford's running mean and sum of squared deviations S, giving
        sd = sqrt(S / (n - 1))
      - a fixed-width histogram, bucket i counting outcomes equal to i

    Outcomes at or beyond the histogram width are not bucketed; they are
    counted in `overflow` and still contribute to E and sd.

    Memory is O(width), independent of the number of trials.

    This class is:
      - owned by exactly one worker
      - not thread-safe
    """

    def __init__(self, width: int = 20):
        if width <= 0:
            raise ValueError("width must be > 0")

        self.n: int = 0
        self.total: int = 0
        self.mean: float = 0.0
        self.s: float = 0.0

        self.histogram: List[int] = [0] * width
        self.overflow: int = 0
        self.max_value: int = 0

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def record(self, value: int) -> None:
        """
        Add one trial outcome (number of successful tries).
        """
        if value < 0:
            raise ValueError("value must be >= 0")

        if value < len(self.histogram):
            self.histogram[value] += 1
        else:
            self.overflow += 1
        if value > self.max_value:
            self.max_value = value

        self.total += value

        d = float(value)
        self.n += 1
        if self.n == 1:
            self.mean = d
            self.s = 0.0
        else:
            prev = self.mean
            self.mean = prev + (d - prev) / self.n
            self.s += (d - prev) * (d - self.mean)

    # ------------------------------------------------------------
    # Derived values (read-only)
    # ------------------------------------------------------------

    @property
    def width(self) -> int:
        return len(self.histogram)

    def expected(self) -> float:
        """
        Expected number of successful tries, E = sum / n.

        Raises ValueError when nothing has been recorded yet.
        """
        if self.n == 0:
            raise ValueError("no samples recorded")
        return self.total / self.n

    def sd(self) -> float:
        """
        Sample standard deviation sqrt(S / (n - 1)).

        A spread is undefined for fewer than two samples; 0.0 is returned
        for n <= 1.
        """
        if self.n <= 1:
            return 0.0
        return math.sqrt(self.s / (self.n - 1))

    def snapshot_histogram(self) -> List[int]:
        return list(self.histogram)
