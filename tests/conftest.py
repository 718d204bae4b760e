"""Pytest configuration and fixtures."""

import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

from spire_win_rate.logging_utils import ROOT_LOGGER_NAME
from spire_win_rate.records import RunRecord
from spire_win_rate.run_source import InMemoryRunSource


def make_run_text(local_time="20250101120000", character="IRONCLAD", ascension=9,
                  win=True, **extra):
    """Serialize a run the way the game does (compact JSON)."""
    data = {
        "character_chosen": character,
        "ascension_level": ascension,
        "local_time": local_time,
        "floor_reached": 57 if win else 12,
    }
    if not win:
        data["killed_by"] = "Gremlin Nob"
    data.update(extra)
    return json.dumps(data, separators=(",", ":"))


def make_run(local_time="20250101120000", character="IRONCLAD", ascension=9, win=True, **extra):
    return RunRecord(
        make_run_text(local_time, character, ascension, win, **extra),
        source=f"{character}/{local_time}.run",
    )


def runs_from_outcomes(outcomes, character="IRONCLAD", start=20250101120000):
    """Build runs from a string like 'WLWWL', one minute apart."""
    return [
        make_run(str(start + index * 100), character=character, win=outcome == "W")
        for index, outcome in enumerate(outcomes)
    ]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """CLI commands install a non-propagating handler; undo it so caplog keeps working."""
    yield
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def run_factory():
    return make_run


@pytest.fixture
def run_text_factory():
    return make_run_text


@pytest.fixture
def runs_dir(tmp_path) -> Path:
    """Runs root with a few files per character, laid out like the game's save folder."""
    root = tmp_path / "runs"
    layout = {
        "IRONCLAD": [("20250101100000", 9, True), ("20250101110000", 9, True),
                     ("20250101120000", 9, False), ("20250101130000", 5, True)],
        "THE_SILENT": [("20250101100500", 9, True), ("20250101140000", 9, False)],
        "DEFECT": [("20250101101000", 9, True)],
        "WATCHER": [("20250101101500", 9, True), ("20250101150000", 9, True)],
    }
    for character, runs in layout.items():
        character_dir = root / character
        character_dir.mkdir(parents=True)
        for local_time, ascension, win in runs:
            (character_dir / f"{local_time}.run").write_text(
                make_run_text(local_time, character, ascension, win), encoding="utf-8"
            )
    # Nested directory entries must be ignored
    (root / "IRONCLAD" / "backup").mkdir()
    return root


@pytest.fixture
def memory_source():
    return InMemoryRunSource({
        "IRONCLAD": [make_run_text("20250101100000", "IRONCLAD"),
                     make_run_text("20250101120000", "IRONCLAD", win=False)],
        "THE_SILENT": [make_run_text("20250101100500", "THE_SILENT")],
        "DEFECT": [make_run_text("20250101101000", "DEFECT")],
        "WATCHER": [make_run_text("20250101101500", "WATCHER")],
    })


@pytest.fixture
def console():
    """Recording console; read output with console.export_text()."""
    return Console(record=True, width=120, highlight=False, color_system=None)
