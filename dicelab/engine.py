"""Roll engine: evaluates parsed dice groups and builds outcome distributions.

Randomness is always passed in. Any object with an inclusive
``randint(a, b)`` works; ``random.Random`` is the usual choice, and a fixed
seed makes every result reproducible.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Sequence
from typing import Protocol

from dicelab.dice import DieGroup, parse_specification

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def make_rng(seed: int | None = None) -> random.Random:
    """Return a new, independent generator (OS-seeded unless ``seed`` is given)."""
    return random.Random(seed)


def _rolls(group: DieGroup) -> bool:
    # Groups built by hand may bypass parser validation; those are skipped whole.
    return group.count > 0 and group.sides > 0


def evaluate(groups: Sequence[DieGroup], rng: RandomSource) -> int:
    """Roll every group once and return the grand total.

    Each group contributes the sum of ``count`` draws in ``[1, sides]`` plus
    its modifier. Groups with a non-positive count or sides contribute
    nothing, modifier included.
    """
    total = 0
    for group in groups:
        if not _rolls(group):
            continue
        total += sum(rng.randint(1, group.sides) for _ in range(group.count))
        total += group.modifier
    return total


def roll(notation: str, rng: RandomSource | None = None) -> int:
    """Parse ``notation`` and roll it once.

    Raises:
        InvalidSpecification: If the notation is invalid.
    """
    groups = parse_specification(notation)
    return evaluate(groups, rng if rng is not None else make_rng())


def simulate(
    groups: Sequence[DieGroup],
    trial_count: int,
    rng: RandomSource | None = None,
) -> Counter[int]:
    """Roll ``groups`` ``trial_count`` times and count each outcome.

    Args:
        groups: Parsed dice groups.
        trial_count: Number of independent trials; zero gives an empty result.
        rng: Random source; a fresh one is created when omitted.

    Returns:
        Counter mapping outcome to the number of trials that produced it.

    Raises:
        ValueError: If trial_count is negative.
    """
    if trial_count < 0:
        raise ValueError(f"trial_count must be non-negative, got {trial_count}")
    if rng is None:
        rng = make_rng()
    distribution: Counter[int] = Counter()
    for _ in range(trial_count):
        distribution[evaluate(groups, rng)] += 1
    logger.debug("Simulated %d trials, %d distinct outcomes", trial_count, len(distribution))
    return distribution


def bounds(groups: Sequence[DieGroup]) -> tuple[int, int]:
    """Return the (minimum, maximum) total ``groups`` can produce."""
    low = high = 0
    for group in groups:
        if not _rolls(group):
            continue
        low += group.count + group.modifier
        high += group.count * group.sides + group.modifier
    return low, high
