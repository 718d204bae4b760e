"""
Win streak detection and analysis module.
"""

import logging
from typing import Dict, Iterable, List

import pandas as pd

from .predicates import is_rotating, is_win
from .records import RunRecord

logger = logging.getLogger(__name__)


def sort_by_longest_winstreaks(runs: Iterable[RunRecord]) -> List[List[RunRecord]]:
    """
    Group runs into win streaks, shortest streak first.

    Runs are ordered by local_time (stable for equal times), consecutive runs
    with the same outcome are grouped, loss groups are dropped and the win
    groups are ordered by length. Equal length streaks keep chronological order.

    Args:
        runs: Run records in any order

    Returns:
        List of streaks, each a chronological list of winning runs.
        The longest streak is last; the list is empty if there are no wins.
    """
    records = list(runs)
    if not records:
        return []

    frame = pd.DataFrame({
        'timestamp': [run.timestamp for run in records],
        'is_win': [is_win(run) for run in records],
    })
    frame = frame.sort_values('timestamp', kind='stable')

    # A new group starts wherever the outcome differs from the previous run
    frame['group'] = frame['is_win'].astype(int).diff().ne(0).cumsum()

    wins = frame[frame['is_win']]
    win_streaks = [
        [records[i] for i in group.index]
        for _, group in wins.groupby('group', sort=True)
    ]

    logger.debug(f"Found {len(win_streaks)} win streaks in {len(records)} runs")
    return sorted(win_streaks, key=len)


def longest_streak(runs: Iterable[RunRecord]) -> List[RunRecord]:
    """Longest win streak, or an empty list when there are no wins."""
    streaks = sort_by_longest_winstreaks(runs)
    return streaks[-1] if streaks else []


def longest_rotating_streak(runs: Iterable[RunRecord]) -> List[RunRecord]:
    """Longest win streak that includes a win with every character."""
    rotating = [streak for streak in sort_by_longest_winstreaks(runs) if is_rotating(streak)]
    return rotating[-1] if rotating else []


def summarize_streaks(streaks: List[List[RunRecord]]) -> Dict:
    """
    Calculate summary statistics for a list of win streaks.

    Args:
        streaks: Output of sort_by_longest_winstreaks

    Returns:
        Dictionary with total_streaks, total_wins, max_length, avg_length
        and length_distribution (length -> number of streaks)
    """
    if not streaks:
        return {
            'total_streaks': 0,
            'total_wins': 0,
            'max_length': 0,
            'avg_length': 0.0,
            'length_distribution': {},
        }

    lengths = pd.Series([len(streak) for streak in streaks])
    length_counts = lengths.value_counts().sort_index()

    return {
        'total_streaks': int(len(lengths)),
        'total_wins': int(lengths.sum()),
        'max_length': int(lengths.max()),
        'avg_length': float(lengths.mean()),
        'length_distribution': {int(length): int(count) for length, count in length_counts.items()},
    }
