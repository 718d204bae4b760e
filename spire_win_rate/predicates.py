"""
Classification predicates over run records.

All predicates are pure. Field based predicates raise MalformedRecord when a
run cannot be parsed; raw text predicates never fail.
"""

import re
from typing import Iterable, List

from .config import CHARACTERS
from .errors import MalformedRecord
from .records import RunRecord

KILLED_BY_KEY = "killed_by"
_KILLED_BY_TOKEN = f'"{KILLED_BY_KEY}"'


def is_win(run: RunRecord) -> bool:
    """
    A run is a win when it has no killed_by key. The value is never looked at.

    Documents that do not parse are checked for the raw key token instead, so
    a partial file without that key still counts as a win.
    """
    try:
        return KILLED_BY_KEY not in run.fields
    except MalformedRecord:
        return _KILLED_BY_TOKEN not in run.raw_text


def contains(run: RunRecord, substring: str) -> bool:
    """Literal substring test on the raw run text."""
    return substring in run.raw_text


def ascension_pattern(level: int) -> str:
    """Raw text pattern matching an ascension level in a compact run file."""
    return f'"ascension_level":{level}'


def played_at_ascension(run: RunRecord, level: int) -> bool:
    """
    Raw text ascension check that never fails.

    The literal pattern is only a prefilter: "ascension_level":1 is also a
    prefix of levels 10-19, so the level must not be followed by another digit.
    """
    pattern = ascension_pattern(level)
    if not contains(run, pattern):
        return False
    return re.search(re.escape(pattern) + r"(?!\d)", run.raw_text) is not None


def filter_ascension(runs: Iterable[RunRecord], level: int) -> List[RunRecord]:
    return [run for run in runs if played_at_ascension(run, level)]


def is_ascension(run: RunRecord, level: int) -> bool:
    return run.ascension_level == level


def is_character(run: RunRecord, character: str) -> bool:
    return run.character_chosen == character


def is_rotating(runs: Iterable[RunRecord]) -> bool:
    """
    True if the runs together cover exactly the four playable characters.

    Order and duplicates do not matter; an unknown character makes it false.
    """
    return {run.character_chosen for run in runs} == set(CHARACTERS)
