"""
Decoder for the compact DTSTART/DTEND timestamps found in ICS exports.
Values are read as UTC wall-clock time and converted to a fixed offset (UTC+9 by default).
"""

import re
from datetime import datetime, tzinfo
from dateutil import tz as dateutil_tz

from icsreport.errors import DateFormatError, DateRangeError

DEFAULT_OFFSET_HOURS = 9
DEFAULT_TIME_FORMAT = "%Y/%m/%d %H:%M"

# YYYYMMDD, one separator char, HHMM; seconds and zone suffix are not read
_TIMESTAMP_RE = re.compile(r"^([0-9]{4})([0-9]{2})([0-9]{2}).([0-9]{2})([0-9]{2})", re.ASCII)

_OFFSETS = {}


def fixed_offset(hours: int = DEFAULT_OFFSET_HOURS) -> tzinfo:
    """
    Get the shared fixed-offset tzinfo for the given hour shift.

    Args:
        hours: Offset from UTC in hours

    Returns:
        dateutil tzoffset instance, cached per offset
    """
    if hours not in _OFFSETS:
        _OFFSETS[hours] = dateutil_tz.tzoffset(f"UTC{hours:+d}", hours * 3600)
    return _OFFSETS[hours]


def decode_timestamp(value: str, offset_hours: int = DEFAULT_OFFSET_HOURS) -> datetime:
    """
    Decode a 'YYYYMMDDTHHMMSS[Z]' value into an aware datetime.

    Args:
        value: Raw text after 'DTSTART:' or 'DTEND:'
        offset_hours: Offset of the returned instant

    Returns:
        datetime tagged with the fixed offset; seconds are always 0

    Raises:
        DateFormatError: value is shorter than 13 chars or a field is not numeric
        DateRangeError: the fields do not form a valid date/time
    """
    match = _TIMESTAMP_RE.match(value)
    if match is None:
        raise DateFormatError("Timestamp does not match YYYYMMDDTHHMM layout", value)

    year, month, day, hour, minute = (int(part) for part in match.groups())
    try:
        utc = datetime(year, month, day, hour, minute, 0, tzinfo=dateutil_tz.UTC)
    except ValueError as e:
        raise DateRangeError(f"Invalid calendar value: {e}", value) from e

    try:
        return utc.astimezone(fixed_offset(offset_hours))
    except OverflowError as e:
        raise DateRangeError(f"Instant out of range after offset: {e}", value) from e


def format_instant(instant: datetime, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """Format an instant for the report, e.g. '2022/01/15 09:30'."""
    return instant.strftime(time_format)
