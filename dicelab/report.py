"""Tabulation of simulated outcome distributions for display."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class DistributionRow:
    value: int
    count: int
    probability: float
    bar_length: int


@dataclass(frozen=True)
class Summary:
    trials: int
    minimum: int
    maximum: int
    mean: float


def distribution_rows(
    distribution: Mapping[int, int], trial_count: int, max_width: int = 60
) -> list[DistributionRow]:
    """Return one row per value from the lowest to highest observed outcome.

    Values inside the range that never came up get a zero-count row. Bars are
    scaled so the most frequent outcome spans ``max_width`` characters.
    """
    if not distribution:
        return []
    low, high = min(distribution), max(distribution)
    peak = max(distribution.values())
    rows = []
    for value in range(low, high + 1):
        count = distribution.get(value, 0)
        probability = count / trial_count if trial_count else 0.0
        # Halves round up, not to even.
        bar = int(count / peak * max_width + 0.5) if peak else 0
        rows.append(DistributionRow(value, count, probability, bar))
    return rows


def format_table(rows: list[DistributionRow]) -> str:
    lines = ["Value\tCount\tProb\tHistogram"]
    for row in rows:
        lines.append(
            f"{row.value:>3}\t{row.count:>7}\t{row.probability:.5f}\t{'#' * row.bar_length}"
        )
    return "\n".join(lines)


def summarize(distribution: Mapping[int, int]) -> Summary | None:
    """Return trial count, range and mean, or None for an empty distribution."""
    trials = sum(distribution.values())
    if not trials:
        return None
    mean = sum(value * count for value, count in distribution.items()) / trials
    return Summary(trials, min(distribution), max(distribution), mean)
