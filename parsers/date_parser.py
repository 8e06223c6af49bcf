"""Parse roster and form date strings into ``datetime.date``."""

import re
from datetime import date, datetime

ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
ISO_TIMESTAMP_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})[T ]")
DMY_PATTERN = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$")


def parse_date(value) -> date:
    """Parse a date from the formats the roster and onboarding form use.

    Accepts ``2010-01-01``, ISO timestamps such as
    ``2010-01-01T00:00:00.000Z`` (only the calendar date is kept), and
    ``DD/MM/YYYY`` or ``DD-MM-YYYY``.  ``date`` and ``datetime`` objects
    pass through as dates.

    Raises:
        ValueError: If *value* is empty or in none of the above formats.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = (value or "").strip()
    if not text:
        raise ValueError("empty date")

    match = ISO_DATE_PATTERN.match(text) or ISO_TIMESTAMP_PATTERN.match(text)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return date(year, month, day)

    match = DMY_PATTERN.match(text)
    if match:
        day, month, year = (int(g) for g in match.groups())
        return date(year, month, day)

    raise ValueError(f"unrecognised date: {text!r}")
