"""Tests for run classification predicates."""

import pytest

from conftest import make_run
from spire_win_rate.errors import MalformedRecord
from spire_win_rate.predicates import (
    ascension_pattern,
    contains,
    filter_ascension,
    is_ascension,
    is_character,
    is_rotating,
    is_win,
    played_at_ascension,
)
from spire_win_rate.records import RunRecord


class TestIsWin:
    """Test win detection."""

    def test_run_without_killed_by_is_win(self):
        assert is_win(make_run(win=True))

    def test_run_with_killed_by_is_loss(self):
        assert not is_win(make_run(win=False))

    def test_killed_by_value_is_ignored(self):
        """Presence alone marks a loss, even with an empty or null value."""
        assert not is_win(RunRecord('{"local_time":"20250101120000","killed_by":null}'))
        assert not is_win(RunRecord('{"local_time":"20250101120000","killed_by":""}'))

    def test_partial_document_without_key_is_win(self):
        assert is_win(RunRecord('{"character_chosen":"IRONCLAD","local_t'))

    def test_partial_document_with_key_is_loss(self):
        assert not is_win(RunRecord('{"killed_by":"Hexaghost","local_t'))


class TestContains:
    """Test raw substring matching."""

    def test_matches_literal_text(self):
        run = make_run(ascension=9)
        assert contains(run, ascension_pattern(9))
        assert not contains(run, ascension_pattern(15))

    def test_never_fails_on_malformed_text(self):
        run = RunRecord("not json at all")
        assert contains(run, "json")
        assert not contains(run, ascension_pattern(9))

    def test_ascension_pattern(self):
        assert ascension_pattern(9) == '"ascension_level":9'


class TestFieldPredicates:
    """Test predicates that read parsed fields."""

    def test_is_ascension(self):
        assert is_ascension(make_run(ascension=20), 20)
        assert not is_ascension(make_run(ascension=19), 20)

    def test_is_character(self):
        assert is_character(make_run(character="DEFECT"), "DEFECT")
        assert not is_character(make_run(character="DEFECT"), "WATCHER")

    def test_malformed_record_raises(self):
        with pytest.raises(MalformedRecord):
            is_character(RunRecord("{broken"), "IRONCLAD")


class TestIsRotating:
    """Test the all-four-characters check."""

    def test_all_four_characters(self):
        runs = [make_run(character=c) for c in ("WATCHER", "IRONCLAD", "DEFECT", "THE_SILENT")]
        assert is_rotating(runs)

    def test_duplicates_do_not_matter(self):
        runs = [make_run(character=c) for c in ("IRONCLAD", "IRONCLAD", "THE_SILENT",
                                                  "DEFECT", "WATCHER", "WATCHER")]
        assert is_rotating(runs)

    def test_two_characters_is_not_rotating(self):
        runs = [make_run(character="IRONCLAD" if i % 2 else "THE_SILENT") for i in range(100)]
        assert not is_rotating(runs)

    def test_unknown_character_is_not_rotating(self):
        runs = [make_run(character=c) for c in ("IRONCLAD", "THE_SILENT", "DEFECT",
                                                  "WATCHER", "HERMIT")]
        assert not is_rotating(runs)

    def test_empty_is_not_rotating(self):
        assert not is_rotating([])

    def test_missing_character_raises(self):
        with pytest.raises(MalformedRecord):
            is_rotating([RunRecord('{"local_time":"20250101120000"}')])


class TestPlayedAtAscension:
    """Test the raw text ascension filter."""

    def test_exact_level_matches(self):
        assert played_at_ascension(make_run(ascension=1), 1)
        assert played_at_ascension(make_run(ascension=20), 20)

    def test_longer_level_does_not_match(self):
        assert not played_at_ascension(make_run(ascension=10), 1)
        assert not played_at_ascension(make_run(ascension=19), 1)
        assert not played_at_ascension(make_run(ascension=20), 2)

    def test_level_at_end_of_document(self):
        assert played_at_ascension(RunRecord('{"ascension_level":1}'), 1)

    def test_never_fails_on_malformed_text(self):
        assert played_at_ascension(RunRecord('{"ascension_level":1,"local_t'), 1)
        assert not played_at_ascension(RunRecord("not json"), 1)

    def test_filter_ascension(self):
        runs = [make_run(str(20250101120000 + i), ascension=level)
                for i, level in enumerate([1, 10, 11, 1, 19])]

        assert filter_ascension(runs, 1) == [runs[0], runs[3]]
