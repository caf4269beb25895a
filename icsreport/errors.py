"""
Exceptions raised while building an event report.
Every one of them aborts the run; none is recovered per record.
"""

from typing import Optional


class IcsReportError(Exception):
    """Base exception for all report errors in this package."""
    pass


class InputError(IcsReportError):
    """Raised when the calendar file cannot be read or decoded."""
    pass


class SettingsError(IcsReportError):
    """Raised when a settings file is unreadable or holds invalid values."""
    pass


class StructuralError(IcsReportError):
    """Raised on END:VEVENT without a matching BEGIN:VEVENT."""

    def __init__(self, message: str, line_no: Optional[int] = None):
        super().__init__(message)
        self.line_no = line_no

    def __str__(self) -> str:
        base = super().__str__()
        if self.line_no is None:
            return base
        return f"line {self.line_no}: {base}"


class DateDecodeError(IcsReportError):
    """Raised when a DTSTART/DTEND value cannot be turned into an instant."""

    def __init__(self, message: str, value: str, line_no: Optional[int] = None):
        super().__init__(message)
        self.value = value
        self.line_no = line_no

    def __str__(self) -> str:
        base = f"{super().__str__()} (value={self.value!r})"
        if self.line_no is None:
            return base
        return f"line {self.line_no}: {base}"


class DateFormatError(DateDecodeError):
    """The value does not follow the YYYYMMDDTHHMM layout."""
    pass


class DateRangeError(DateDecodeError):
    """The numeric fields do not form a valid calendar date/time."""
    pass
