# simulations/report.py

from __future__ import annotations

import math
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from .common import ConfigResult, max_bucket

from cantstop.lanes import LaneConfig


# Height of the tallest histogram bar, in characters
HIST_HEIGHT = 80
BAR = "■"
BAR_SCALE = 5  # characters per expected try in the summary table


def format_lanes(config: LaneConfig) -> str:
    return "[" + " ".join(f"{t:2d}" for t in config.targets) + "]"


def format_table(results: Sequence[ConfigResult]) -> str:
    """
    Summary table: lanes, expected tries, standard deviation and a bar of E.
    """
    lines = [
        "Lanes      E   Sd       E (Bar)",
        "----------------------------------------------------------",
    ]
    for r in results:
        lines.append(
            f"{format_lanes(r.config)} {r.expected:4.1f} {r.sd:4.1f}  \t"
            + BAR * int(r.expected * BAR_SCALE)
        )
    return "\n".join(lines) + "\n"


def histogram_scale(results: Sequence[ConfigResult], height: int = HIST_HEIGHT) -> int:
    """
    Counts per bar character, shared by all histograms so they are comparable.
    Never below 1.
    """
    return max(1, max_bucket(list(results)) // height)


def format_histogram(
    r: ConfigResult,
    scale: int,
    truncate: bool = True,
) -> str:
    """
    ASCII histogram of one configuration, one row per number of tries.

    With truncate=True the rows stop after the first bucket (past 0) that
    scales to an empty bar; the tail is too thin to draw.
    """
    lines = [str(r.config)]
    for i, h in enumerate(r.histogram):
        bar = h // scale
        lines.append(f"{i:2d} {BAR * bar} {bar}")
        if truncate and bar == 0 and i != 0:
            break
    return "\n".join(lines) + "\n"


def format_histograms(
    results: Sequence[ConfigResult],
    height: int = HIST_HEIGHT,
    truncate: bool = True,
) -> str:
    scale = histogram_scale(results, height)
    return "".join(format_histogram(r, scale, truncate=truncate) for r in results)


def format_report(
    results: Sequence[ConfigResult],
    height: int = HIST_HEIGHT,
    truncate: bool = True,
) -> str:
    return (
        format_table(results)
        + "\n"
        + format_histograms(results, height=height, truncate=truncate)
    )


def plot_histograms(
    results: Sequence[ConfigResult],
    path: Optional[str] = None,
    cols: int = 6,
) -> None:
    """
    Bar chart of every configuration's histogram on a shared x/y range.
    Saves to `path` when given, otherwise opens a window.
    """
    results = list(results)
    if not results:
        raise ValueError("results must be non-empty")

    cols = min(cols, len(results))
    rows = math.ceil(len(results) / cols)
    width = max(len(r.histogram) for r in results)
    ymax = max_bucket(results)

    fig = plt.figure(figsize=(2.5 * cols, 2.0 * rows))
    for i, r in enumerate(results):
        ax = fig.add_subplot(rows, cols, i + 1)
        ax.bar(range(len(r.histogram)), r.histogram)
        ax.set_title(f"{r.config}  E={r.expected:.2f}", fontsize=8)
        ax.set_xlim(-0.5, width - 0.5)
        if ymax > 0:
            ax.set_ylim(0, ymax)
        ax.tick_params(labelsize=6)

    fig.suptitle(f"Tries until a roll misses every lane (trials={results[0].trials})")
    fig.tight_layout(rect=[0, 0.02, 1, 0.95])

    if path:
        fig.savefig(path)
        plt.close(fig)
    else:
        plt.show()
