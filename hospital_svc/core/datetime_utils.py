"""
Date and datetime utilities for the Hospital Records Service.

Admission dates are calendar dates with no time component:
- Database storage: ISO 8601 date strings ("2024-01-15"), SQLite stores as TEXT
- Internal processing: datetime.date
- Timestamps for logs and health endpoints are UTC datetimes

Usage:
    from core.datetime_utils import today, to_db_date, from_db_date

    stored = to_db_date(patient.admission_date or today())
    admission = from_db_date(row[10])
"""
import logging
from datetime import date, datetime, timezone
from typing import Optional, Union

logger = logging.getLogger(__name__)


# =============================================================================
# CORE UTILITIES
# =============================================================================

def utc_now() -> datetime:
    """
    Get current datetime in UTC with timezone info.

    Returns:
        datetime: Current time as timezone-aware datetime in UTC.
    """
    return datetime.now(timezone.utc)


def today() -> date:
    """Get the current local calendar date."""
    return date.today()


def format_iso(dt: datetime) -> str:
    """
    Format datetime to ISO 8601 string with 'Z' suffix.

    Naive datetimes are assumed to already be UTC.

    Example:
        >>> format_iso(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        '2024-01-15T10:30:00Z'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


# =============================================================================
# PARSING
# =============================================================================

def parse_date(value: Union[str, date, datetime]) -> date:
    """
    Parse a date value.

    Accepts a date, a datetime (its date part is used) or a string in
    ISO format ("2024-01-15", "2024-01-15 10:30:00") or day-first format
    ("15-01-2024", "15/01/2024").

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise ValueError(f"Expected date or string, got {type(value).__name__}")

    value = value.strip()

    # ISO first; SQLite's CURRENT_DATE and date() both produce this
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        pass

    for fmt in ("%d-%m-%Y", "%d/%m/%Y"):
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Cannot parse date: '{value}'")


# =============================================================================
# DATABASE HELPERS
# =============================================================================

def to_db_date(value: Optional[date]) -> Optional[str]:
    """
    Convert a date to its SQLite storage form.

    Returns:
        ISO 8601 date string, or None when value is None.
    """
    if value is None:
        return None
    return parse_date(value).isoformat()


def from_db_date(value: Optional[Union[str, date]]) -> date:
    """
    Parse an admission date read back from SQLite.

    A stored record always has an admission date, so a missing or
    unparseable value is logged and replaced with today, the same default
    an insert without a date gets.
    """
    if value is None:
        logger.warning("Stored admission date is missing, using today")
        return today()
    try:
        return parse_date(value)
    except ValueError as e:
        logger.warning(
            f"Failed to parse stored date '{value}', using today: {e}",
            extra={"stored_value": str(value)}
        )
        return today()
