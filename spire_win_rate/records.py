"""
Run records and the record parser.
"""

import json
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Optional

from .dates import is_spire_date
from .errors import MalformedRecord, MalformedTimestamp


def parse_record(raw_text: str) -> Dict[str, Any]:
    """
    Parse the raw text of a run file into a field mapping.

    Args:
        raw_text: Serialized run document

    Returns:
        Mapping from field name to value

    Raises:
        MalformedRecord: If the text is not a JSON object
    """
    try:
        data = json.loads(raw_text)
    except (TypeError, ValueError) as e:
        raise MalformedRecord(f"Run is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedRecord(f"Run document must be a JSON object, got {type(data).__name__}")

    return data


@dataclass(frozen=True)
class RunRecord:
    """
    One recorded play session.

    Fields are parsed from raw_text on first access and cached; the record
    itself never changes.
    """
    raw_text: str
    source: Optional[str] = None

    @cached_property
    def fields(self) -> Dict[str, Any]:
        try:
            return parse_record(self.raw_text)
        except MalformedRecord as e:
            e.details.setdefault("source", self.source)
            raise

    def _require(self, name: str) -> Any:
        fields = self.fields
        if name not in fields:
            raise MalformedRecord(
                f"Run {self.source or '<unknown>'} has no {name!r} field",
                details={"source": self.source, "field": name},
            )
        return fields[name]

    @property
    def local_time(self) -> str:
        return self._require("local_time")

    @property
    def timestamp(self) -> int:
        """local_time as an integer, the chronological sort key."""
        value = self.local_time
        if not is_spire_date(value):
            raise MalformedTimestamp(
                f"Run {self.source or '<unknown>'} has local_time {value!r}",
                details={"source": self.source, "value": value},
            )
        return int(value)

    @property
    def character_chosen(self) -> str:
        return self._require("character_chosen")

    @property
    def ascension_level(self) -> int:
        value = self._require("ascension_level")
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise MalformedRecord(
                f"Run {self.source or '<unknown>'} has ascension_level {value!r}",
                details={"source": self.source, "field": "ascension_level"},
            ) from e

    @property
    def killed_by(self) -> Optional[str]:
        return self.fields.get("killed_by")

    def __repr__(self) -> str:
        return f"RunRecord(source={self.source!r})"
