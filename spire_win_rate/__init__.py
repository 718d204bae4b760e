"""
Slay the Spire Run Statistics

Win rates and win streaks computed from the run files the game saves locally.
"""

__version__ = "1.0.0"

from .config import CHARACTERS, ReportConfig
from .dates import format_spire_date
from .errors import EmptyPopulation, MalformedRecord, MalformedTimestamp, RunStatsError
from .predicates import contains, is_rotating, is_win
from .records import RunRecord, parse_record
from .report import ReportGenerator
from .run_source import DirectoryRunSource, InMemoryRunSource, load_runs
from .streaks import longest_streak, sort_by_longest_winstreaks
from .win_rate import compute_win_rate

__all__ = [
    "CHARACTERS",
    "ReportConfig",
    "format_spire_date",
    "EmptyPopulation",
    "MalformedRecord",
    "MalformedTimestamp",
    "RunStatsError",
    "contains",
    "is_rotating",
    "is_win",
    "RunRecord",
    "parse_record",
    "ReportGenerator",
    "DirectoryRunSource",
    "InMemoryRunSource",
    "load_runs",
    "longest_streak",
    "sort_by_longest_winstreaks",
    "compute_win_rate",
]
