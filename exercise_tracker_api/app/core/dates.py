"""
Calendar date helpers.

Exercise dates are calendar days.  They are stored as naive UTC
datetimes at midnight, which is what PyMongo hands back when reading a
BSON date, so values compare equal whether they come from a request or
from the database.
"""

from datetime import datetime, timezone
from typing import Optional


def to_calendar_day(value: datetime) -> datetime:
    """Truncate ``value`` to midnight of its UTC calendar day (naive)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a textual date into a calendar‑day datetime.

    Accepts ``YYYY-MM-DD`` as well as full ISO 8601 timestamps (which
    are reduced to their UTC calendar day).  Returns ``None`` when the
    value is missing or cannot be parsed.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return to_calendar_day(parsed)


def today() -> datetime:
    """Return the current UTC calendar day."""
    return to_calendar_day(datetime.now(timezone.utc))


def format_date(value: datetime) -> str:
    """Render a date the way log entries show it, e.g. ``Mon Jan 01 2024``."""
    return value.strftime("%a %b %d %Y")
