"""
Filter / sort / render pipeline.
Turns scanned records into the tab-separated event report.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from icsreport.datetime_decoder import DEFAULT_TIME_FORMAT, format_instant
from icsreport.event_models import RawEventRecord, ResolvedEvent
from icsreport.line_scanner import scan_events
from icsreport.logging_helper import Log
from icsreport.settings_manager import DEFAULT_SETTINGS, ReportSettings, get_cutoff, validate_settings


def resolve_events(records: Iterable[RawEventRecord]) -> List[ResolvedEvent]:
    """Keep records with start, end and summary; the rest are dropped without error."""
    resolved: List[ResolvedEvent] = []
    for index, record in enumerate(records):
        event = record.resolve()
        if event is None:
            Log.debug(f"Skipping incomplete event #{index}: {record}")
            continue
        resolved.append(event)
    return resolved


def filter_from_cutoff(events: Iterable[ResolvedEvent], cutoff: datetime) -> List[ResolvedEvent]:
    """Drop events starting strictly before the cutoff."""
    return [event for event in events if event.start >= cutoff]


def sort_events(events: Iterable[ResolvedEvent]) -> List[ResolvedEvent]:
    return sorted(events, key=ResolvedEvent.sort_key)


def render_line(event: ResolvedEvent, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    start = format_instant(event.start, time_format)
    end = format_instant(event.end, time_format)
    return f"{start}\t{end}\t{event.summary}"


def render_report(events: Iterable[ResolvedEvent], time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """
    Render one line per event, each terminated by a newline.

    Args:
        events: Events in output order
        time_format: strftime pattern for start and end

    Returns:
        Report text, empty string if there are no events
    """
    return "".join(render_line(event, time_format) + "\n" for event in events)


def build_report(text: str, settings: Optional[ReportSettings] = None) -> str:
    """
    Run the whole pipeline on calendar text.

    The report is built entirely in memory; any error is raised before
    a single line is returned.

    Args:
        text: Calendar text
        settings: Report settings merged over the defaults; defaults if None

    Returns:
        Report text

    Raises:
        SettingsError: settings hold an invalid cutoff, offset or format
    """
    merged: ReportSettings = DEFAULT_SETTINGS.copy()
    if settings is not None:
        merged.update(settings)
        validate_settings(merged)
    offset_hours = merged["utc_offset_hours"]
    time_format = merged["time_format"]
    cutoff = get_cutoff(merged)

    Log.section("Event Report")
    records = scan_events(text, offset_hours)
    resolved = resolve_events(records)
    kept = filter_from_cutoff(resolved, cutoff)
    ordered = sort_events(kept)

    Log.kv({
        "stage": "report",
        "records": len(records),
        "complete": len(resolved),
        "after_cutoff": len(ordered),
        "cutoff": cutoff.isoformat(),
    })
    return render_report(ordered, time_format)
