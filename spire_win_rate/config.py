"""
Configuration models for the run statistics report.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Union

import yaml
from pydantic import BaseModel, Field, validator


CHARACTERS = ("IRONCLAD", "THE_SILENT", "DEFECT", "WATCHER")

# Section labels used by the console report
CHARACTER_LABELS: Dict[str, str] = {
    "IRONCLAD": "IRONCLAD",
    "THE_SILENT": "SILENT",
    "DEFECT": "DEFECT",
    "WATCHER": "WATCHER",
}

DEFAULT_ASCENSION_LEVEL = 9
MAX_ASCENSION_LEVEL = 20


def default_runs_dir() -> Path:
    """Runs root: $SPIRE_RUNS_DIR if set, otherwise ./runs."""
    return Path(os.environ.get("SPIRE_RUNS_DIR", "runs"))


class ReportConfig(BaseModel):
    """Settings for one report invocation."""

    runs_dir: Path = Field(
        default_factory=default_runs_dir,
        description="Directory holding one sub-directory of run files per character"
    )
    characters: List[str] = Field(
        default_factory=lambda: list(CHARACTERS),
        description="Characters to include, in report order"
    )
    ascension_level: int = Field(
        default=DEFAULT_ASCENSION_LEVEL,
        ge=0,
        le=MAX_ASCENSION_LEVEL,
        description="Ascension level used for win rates and the rotating streak"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @validator('characters')
    def validate_characters(cls, v):
        unknown = [character for character in v if character not in CHARACTERS]
        if unknown:
            raise ValueError(f"Unknown characters: {', '.join(unknown)}")
        if not v:
            raise ValueError('At least one character is required')
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_yaml(cls, file_path: Union[str, Path]) -> 'ReportConfig':
        """Load configuration from YAML file."""
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_json(cls, file_path: Union[str, Path]) -> 'ReportConfig':
        """Load configuration from JSON file."""
        with open(file_path, 'r') as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'ReportConfig':
        """Load configuration, picking the format from the file suffix."""
        suffix = Path(file_path).suffix.lower()
        if suffix in ('.yaml', '.yml'):
            return cls.from_yaml(file_path)
        if suffix == '.json':
            return cls.from_json(file_path)
        raise ValueError(f"Config file must be YAML or JSON: {file_path}")
