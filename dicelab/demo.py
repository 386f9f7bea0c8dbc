"""Console demonstration: sample rolls and simulated distributions.

Usage:
    python -m dicelab.demo
    python -m dicelab.demo 4d6 "2d8+1,1d4" --trials 50000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys

from dicelab.config import settings
from dicelab.dice import parse, render
from dicelab.engine import evaluate, make_rng, roll, simulate
from dicelab.report import distribution_rows, format_table

logger = logging.getLogger(__name__)

EXAMPLE_SPECIFICATION = "2d6+2,3d10, 8d10+6"
DEFAULT_SPECIFICATIONS = ["1d6", "2d6", "3d6", "1d10", "2d10", "3d10"]


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def demonstrate(specification: str, trials: int, seed: int | None = None) -> None:
    """Print the canonical form, one sample roll and a simulated distribution.

    Each call draws from its own generator, seeded with ``seed`` when given.
    """
    rng = make_rng(seed)
    print(f'Specification: "{specification}"')
    result = parse(specification)
    if not result.ok:
        print("  Parsing error in specification.")
        return
    groups = result.groups
    print(f"  Parsed as: {render(groups)}")
    print(f"  One sample roll: {evaluate(groups, rng)}")
    print(f"  Simulation of {trials} rolls...")
    distribution = simulate(groups, trials, rng)
    rows = distribution_rows(distribution, trials, settings.histogram_width)
    if rows:
        print(format_table(rows))
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicelab.demo", description="Roll dice notation and tabulate outcomes."
    )
    parser.add_argument(
        "specifications",
        nargs="*",
        default=DEFAULT_SPECIFICATIONS,
        help="dice notation to simulate (default: %(default)s)",
    )
    parser.add_argument("--trials", type=int, default=settings.default_trials)
    parser.add_argument("--seed", type=int, default=settings.seed)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level)
    try:
        example = roll(EXAMPLE_SPECIFICATION, make_rng(args.seed))
        print(f'Example: roll("{EXAMPLE_SPECIFICATION}") => {example}')
        print()
        for specification in args.specifications:
            demonstrate(specification, args.trials, args.seed)
    except Exception as exc:
        logger.exception("Demonstration failed")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
