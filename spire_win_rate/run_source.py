"""
Run sources: where run files come from.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from .records import RunRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """A concrete run file."""
    path: str


@dataclass(frozen=True)
class DirEntry:
    """A directory placeholder; never holds run data."""
    path: str


RunEntry = Union[FileEntry, DirEntry]


class RunSource(ABC):
    """Abstract base class for run sources."""

    @abstractmethod
    def entries(self, character: str) -> Iterable[RunEntry]:
        """List the entries stored for a character."""
        pass

    @abstractmethod
    def read_text(self, entry: FileEntry) -> str:
        """Return the full raw text of a run file."""
        pass


class DirectoryRunSource(RunSource):
    """
    Reads runs laid out the way the game saves them: one sub-directory per
    character under the runs root, one JSON file per run.
    """

    def __init__(self, runs_dir: Union[str, Path], encoding: str = "utf-8"):
        self.runs_dir = Path(runs_dir)
        self.encoding = encoding

    def entries(self, character: str) -> Iterator[RunEntry]:
        character_dir = self.runs_dir / character
        if not character_dir.is_dir():
            logger.warning(f"No run directory for {character} at {character_dir}")
            return

        yield DirEntry(str(character_dir))
        for path in sorted(character_dir.rglob("*")):
            if path.is_file():
                yield FileEntry(str(path))
            else:
                yield DirEntry(str(path))

    def read_text(self, entry: FileEntry) -> str:
        with open(entry.path, 'r', encoding=self.encoding) as f:
            return f.read()


class InMemoryRunSource(RunSource):
    """Run source backed by a dict of character -> raw run texts, for tests and fixtures."""

    def __init__(self, runs: Optional[Mapping[str, Sequence[str]]] = None):
        self._texts: Dict[str, str] = {}
        self._entries: Dict[str, List[RunEntry]] = {}
        for character, texts in (runs or {}).items():
            self.add_runs(character, texts)

    def add_runs(self, character: str, texts: Iterable[str]) -> None:
        entries = self._entries.setdefault(character, [DirEntry(f"memory://{character}")])
        for text in texts:
            path = f"memory://{character}/{len(self._texts)}.run"
            self._texts[path] = text
            entries.append(FileEntry(path))

    def entries(self, character: str) -> List[RunEntry]:
        return list(self._entries.get(character, []))

    def read_text(self, entry: FileEntry) -> str:
        return self._texts[entry.path]


def load_runs(source: RunSource, character: str) -> List[RunRecord]:
    """
    Load every run file for a character, skipping directory entries.

    Args:
        source: Where to read runs from
        character: Character identifier, e.g. "IRONCLAD"

    Returns:
        List of run records in source order
    """
    runs = []
    for entry in source.entries(character):
        if isinstance(entry, DirEntry):
            logger.debug(f"Skipping directory {entry.path}")
            continue
        runs.append(RunRecord(source.read_text(entry), source=entry.path))

    logger.info(f"Loaded {len(runs)} runs for {character}")
    return runs
