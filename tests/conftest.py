import pytest

from icsreport.logging_helper import Log


@pytest.fixture(autouse=True)
def reset_log():
    Log.set_verbose(True)
    yield
    Log.close_file()
    Log.set_verbose(True)


def make_ics(*blocks: str) -> str:
    """Wrap VEVENT bodies into a calendar document."""
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", "PRODID:-//test//EN"]
    for body in blocks:
        lines.append("BEGIN:VEVENT")
        lines.extend(line.strip() for line in body.strip().splitlines())
        lines.append("END:VEVENT")
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"


@pytest.fixture
def ics():
    return make_ics
