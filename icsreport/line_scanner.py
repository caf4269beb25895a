"""
Line scanner for iCalendar text.
Walks the input line by line, tracking whether we are inside a VEVENT block,
and collects DTSTART / DTEND / SUMMARY into one RawEventRecord per block.
"""

from typing import List

from icsreport.datetime_decoder import DEFAULT_OFFSET_HOURS, decode_timestamp
from icsreport.errors import DateDecodeError, StructuralError
from icsreport.event_models import InsideEvent, Outside, RawEventRecord, ScanState
from icsreport.logging_helper import Log

BEGIN_EVT = "BEGIN:VEVENT"
END_EVT = "END:VEVENT"

DTSTART_PREFIX = "DTSTART:"
DTEND_PREFIX = "DTEND:"
SUMMARY_PREFIX = "SUMMARY:"


def scan_events(text: str, offset_hours: int = DEFAULT_OFFSET_HOURS) -> List[RawEventRecord]:
    """
    Collect one RawEventRecord per BEGIN:VEVENT ... END:VEVENT block.

    Args:
        text: Full calendar text
        offset_hours: Offset applied to decoded DTSTART/DTEND values

    Returns:
        Records in the order their END:VEVENT lines appear

    Raises:
        StructuralError: END:VEVENT seen outside a block
        DateFormatError, DateRangeError: a DTSTART/DTEND value failed to decode
    """
    records: List[RawEventRecord] = []
    state: ScanState = Outside()

    for line_no, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()

        if line == BEGIN_EVT:
            if isinstance(state, InsideEvent):
                Log.warn(f"line {line_no}: BEGIN:VEVENT inside an open block, discarding partial event")
            state = InsideEvent()
            continue

        if line == END_EVT:
            if not isinstance(state, InsideEvent):
                raise StructuralError("END:VEVENT without matching BEGIN:VEVENT", line_no)
            records.append(state.record)
            state = Outside()
            continue

        if not isinstance(state, InsideEvent):
            continue

        try:
            _apply_field(state.record, line, offset_hours)
        except DateDecodeError as e:
            e.line_no = line_no
            raise

    if isinstance(state, InsideEvent):
        Log.warn("Input ended inside a VEVENT block, dropping unterminated event")

    Log.kv({"stage": "scan", "blocks": len(records)})
    return records


def _apply_field(record: RawEventRecord, line: str, offset_hours: int):
    """Store a DTSTART/DTEND/SUMMARY line on the record; later lines overwrite earlier ones."""
    if line.startswith(DTSTART_PREFIX):
        record.start = decode_timestamp(line[len(DTSTART_PREFIX):], offset_hours)
    elif line.startswith(DTEND_PREFIX):
        record.end = decode_timestamp(line[len(DTEND_PREFIX):], offset_hours)
    elif line.startswith(SUMMARY_PREFIX):
        record.summary = line[len(SUMMARY_PREFIX):]
