# simulations/cli.py

from __future__ import annotations

import argparse
import logging
import sys

from .common import DEFAULT_SEED, DEFAULT_TRIALS, EXECUTORS, HISTOGRAM_WIDTH
from .report import format_report, plot_histograms
from .run import run_simulation

from cantstop.lanes import CONFIGS, parse_lanes


LOG_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monte Carlo odds of Can't Stop lane configurations: "
        "expected successful rolls before a roll misses every lane."
    )
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="turns per configuration")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="master RNG seed")
    parser.add_argument(
        "--random-seed",
        action="store_true",
        help="seed every configuration from OS entropy (non-reproducible)",
    )
    parser.add_argument("--width", type=int, default=HISTOGRAM_WIDTH, help="histogram width")
    parser.add_argument("--executor", choices=EXECUTORS, default="process")
    parser.add_argument("--workers", type=int, default=None, help="pool size")
    parser.add_argument(
        "--lanes",
        action="append",
        metavar="T[,T...]",
        help="simulate only these lanes, e.g. --lanes 7 --lanes 2,3,4",
    )
    parser.add_argument(
        "--full-histograms",
        action="store_true",
        help="print every histogram row instead of stopping at the thin tail",
    )
    parser.add_argument(
        "--plot",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="plot histograms with matplotlib (saved to PATH if given)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        configs = [parse_lanes(s) for s in args.lanes] if args.lanes else list(CONFIGS)
        sim = run_simulation(
            trials=args.trials,
            configs=configs,
            seed=args.seed,
            seed_mode="random" if args.random_seed else "fixed",
            width=args.width,
            executor=args.executor,
            max_workers=args.workers,
        )
    except ValueError as e:
        parser.error(str(e))

    print(format_report(sim.results, truncate=not args.full_histograms), end="")

    if args.plot is not None:
        plot_histograms(sim.results, path=args.plot or None)

    return 0


def _entry() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(_entry())
