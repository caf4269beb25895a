"""
Main entry point for the icsreport command.
Usage: icsreport <calendar.ics>
"""

import sys
from pathlib import Path
from typing import List, Optional

from icsreport.errors import IcsReportError, InputError
from icsreport.logging_helper import Log
from icsreport.report_pipeline import build_report
from icsreport.settings_manager import load_settings

USAGE = "usage: icsreport <calendar.ics>"


def read_calendar_text(path: Path) -> str:
    """
    Read the whole calendar file as UTF-8.

    Raises:
        InputError: file missing, unreadable or not valid UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read file: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise InputError(f"File is not valid UTF-8: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    Log.set_verbose(False)
    path = Path(argv[0])
    try:
        text = read_calendar_text(path)
        report = build_report(text, load_settings())
    except IcsReportError as e:
        Log.error(f"{path}: {e}")
        return 1

    # Report is always UTF-8, whatever the terminal encoding
    sys.stdout.flush()
    sys.stdout.buffer.write(report.encode("utf-8"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
