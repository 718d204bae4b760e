"""
Win rate calculation.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from .errors import EmptyPopulation
from .predicates import filter_ascension, is_win
from .records import RunRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WinRateSummary:
    total: int
    wins: int
    losses: int
    win_rate_percent: float


def compute_win_rate(runs: Iterable[RunRecord]) -> WinRateSummary:
    """
    Compute the win rate of a population of runs.

    Args:
        runs: Runs already filtered to the population of interest

    Returns:
        WinRateSummary with counts and the win rate in percent

    Raises:
        EmptyPopulation: If there are no runs
    """
    records = list(runs)
    total = len(records)
    if total == 0:
        raise EmptyPopulation()

    losses = sum(1 for run in records if not is_win(run))
    win_rate_percent = 100.0 - 100.0 * losses / total

    return WinRateSummary(
        total=total,
        wins=total - losses,
        losses=losses,
        win_rate_percent=win_rate_percent,
    )


def ascension_win_rate(runs: Iterable[RunRecord], level: int) -> WinRateSummary:
    """Win rate over the runs played at one ascension level."""
    filtered = filter_ascension(runs, level)
    if not filtered:
        raise EmptyPopulation(f"No A{level} runs found", details={"ascension_level": level})

    logger.debug(f"{len(filtered)} runs at ascension {level}")
    return compute_win_rate(filtered)
