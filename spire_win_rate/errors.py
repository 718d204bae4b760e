"""
Error classes for run statistics.

Every error carries a human readable message and an optional details dict so
the report can annotate the line it could not compute.
"""

from typing import Optional, Dict, Any


class RunStatsError(Exception):
    """
    Base error class for run statistics.

    Attributes:
        message: Error message (default: "Run statistics error")
        details: Optional additional error details
    """
    message: str = "Run statistics error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class MalformedRecord(RunStatsError):
    """Run text could not be parsed, or a required field is missing."""
    message = "Malformed run record"


class MalformedTimestamp(RunStatsError):
    """A local_time value is not a 14 digit string."""
    message = "Malformed timestamp"


class EmptyPopulation(RunStatsError):
    """Win rate requested over zero runs."""
    message = "No runs to compute a win rate from"
