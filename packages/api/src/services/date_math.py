# This project was developed with assistance from AI tools.
"""Calendar-date arithmetic shared by the deadline classifier.

Everything here works on whole calendar days. Datetimes are truncated to
their date before any subtraction so time-of-day, DST shifts and timezone
offsets can never move a result by one day.
"""

import logging
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

# Date formats accepted from records and query strings
_DATE_FORMATS = [
    "%Y-%m-%d",  # 2026-01-15
    "%d/%m/%Y",  # 15/01/2026
    "%Y/%m/%d",  # 2026/01/15
    "%d-%m-%Y",  # 15-01-2026
]


def _parse_date(value: str) -> date | None:
    """Try the known formats, then full ISO timestamps."""
    text = value.strip()
    if not text:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def to_calendar_date(value: object) -> date | None:
    """Normalize a date-like value to a calendar date.

    Accepts ``date``, ``datetime`` (truncated, never shifted between zones)
    and strings. Anything missing or unparseable yields None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = _parse_date(value)
        if parsed is None and value.strip():
            logger.warning("Could not parse date value '%s'", value)
        return parsed
    logger.warning("Unsupported date value of type %s", type(value).__name__)
    return None


def days_until(target: date | datetime, reference: date | datetime) -> int:
    """Whole days from ``reference`` to ``target``.

    Tomorrow is 1, today is 0, yesterday is -1.
    """
    target_day = target.date() if isinstance(target, datetime) else target
    reference_day = reference.date() if isinstance(reference, datetime) else reference
    return (target_day - reference_day).days


def today_in(tz_name: str) -> date:
    """Current calendar date in the given IANA zone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def expiry_from_validity(issued: object, validity_days: int | None) -> date | None:
    """Expiry of a certidão: emission date plus its validity in days."""
    issued_day = to_calendar_date(issued)
    if issued_day is None or validity_days is None:
        return None
    return issued_day + timedelta(days=validity_days)


def format_br(value: object) -> str:
    """Render a date as DD/MM/YYYY, or an empty string when missing."""
    day = to_calendar_date(value)
    if day is None:
        return ""
    return day.strftime("%d/%m/%Y")
