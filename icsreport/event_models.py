"""
Event data models for calendar event extraction.
Defines RawEventRecord (one VEVENT block as scanned), ResolvedEvent and the scanner states.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple, Union


@dataclass
class RawEventRecord:
    """
    Fields collected between BEGIN:VEVENT and END:VEVENT.
    Any of them may be missing if the block had no such line.
    """
    start: Optional[datetime] = None  # Aware datetime, fixed offset
    end: Optional[datetime] = None
    summary: Optional[str] = None  # Verbatim text after "SUMMARY:"

    def resolve(self) -> Optional["ResolvedEvent"]:
        """Return a ResolvedEvent, or None when a field is missing."""
        if self.start is None:
            return None
        if self.end is None:
            return None
        if self.summary is None:
            return None
        return ResolvedEvent(start=self.start, end=self.end, summary=self.summary)


@dataclass(frozen=True, order=True)
class ResolvedEvent:
    """
    Complete event ready for the report.
    Field order gives the natural sort: start, then end, then summary.
    """
    start: datetime
    end: datetime
    summary: str

    def sort_key(self) -> Tuple[datetime, datetime, str]:
        return (self.start, self.end, self.summary)


@dataclass(frozen=True)
class Outside:
    """Scanner state between VEVENT blocks."""


@dataclass(frozen=True)
class InsideEvent:
    """Scanner state inside a VEVENT block; owns the record being filled."""
    record: RawEventRecord = field(default_factory=RawEventRecord)


ScanState = Union[Outside, InsideEvent]
