"""
Report settings management.

Holds the cutoff instant, the UTC offset applied to decoded timestamps and
the timestamp format used in the report. The CLI always runs on the defaults;
library callers can load overrides from a JSON file.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, TypedDict
from dateutil import parser as dateutil_parser

from icsreport.datetime_decoder import DEFAULT_OFFSET_HOURS, DEFAULT_TIME_FORMAT, fixed_offset
from icsreport.errors import SettingsError
from icsreport.logging_helper import Log


class ReportSettings(TypedDict, total=False):
    cutoff: str
    utc_offset_hours: int
    time_format: str


DEFAULT_SETTINGS: ReportSettings = {
    "cutoff": "2022-01-10T00:00:00+09:00",
    "utc_offset_hours": DEFAULT_OFFSET_HOURS,
    "time_format": DEFAULT_TIME_FORMAT,
}


def load_settings(path: Optional[Path] = None) -> ReportSettings:
    """
    Load settings, merging a JSON file over the defaults.

    A broken settings file raises instead of falling back, since it would
    silently change which events end up in the report.
    """
    merged: ReportSettings = DEFAULT_SETTINGS.copy()
    if path is None:
        return merged

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as err:
        raise SettingsError(f"Failed to read settings file ({path}): {err}") from err
    if not isinstance(data, dict):
        raise SettingsError(f"Settings data is not a JSON object ({path})")

    # Merge only known keys
    for key in DEFAULT_SETTINGS:
        if key in data:
            merged[key] = data[key]  # type: ignore[literal-required]
    unknown = sorted(set(data) - set(DEFAULT_SETTINGS))
    if unknown:
        Log.warn(f"Ignoring unknown settings keys: {', '.join(unknown)}")

    validate_settings(merged)
    Log.info(f"Loaded settings from {path}")
    return merged


def validate_settings(settings: ReportSettings) -> None:
    offset = settings.get("utc_offset_hours")
    if isinstance(offset, bool) or not isinstance(offset, int) or not -23 <= offset <= 23:
        raise SettingsError(f"Invalid utc_offset_hours value: {offset!r}")
    if not isinstance(settings.get("time_format"), str):
        raise SettingsError(f"Invalid time_format value: {settings.get('time_format')!r}")
    get_cutoff(settings)


def get_cutoff(settings: ReportSettings) -> datetime:
    """
    Parse the cutoff instant.

    Args:
        settings: Settings holding an ISO-8601 'cutoff'

    Returns:
        Aware datetime; a cutoff without offset is taken in the configured offset
    """
    raw = settings.get("cutoff", DEFAULT_SETTINGS["cutoff"])
    if not isinstance(raw, str):
        raise SettingsError(f"Invalid cutoff value: {raw!r}")
    try:
        cutoff = dateutil_parser.isoparse(raw)
    except ValueError as err:
        raise SettingsError(f"Invalid cutoff value '{raw}': {err}") from err
    if cutoff.tzinfo is None:
        offset = settings.get("utc_offset_hours", DEFAULT_OFFSET_HOURS)
        cutoff = cutoff.replace(tzinfo=fixed_offset(offset))
    return cutoff
