"""
Check-in / check-out parsing for availability queries.

checkIn is mandatory and must parse. checkOut is forgiving: when it is
absent or unparseable it becomes checkIn + 1 day. A range that does not
move forward is rejected. Datetimes with an offset are read as their UTC
calendar date.
"""

from datetime import date, datetime, timedelta, timezone

from src.domain.errors import QueryValidationError

ONE_NIGHT = timedelta(days=1)


def parse_date(raw: str | None) -> date | None:
    """Parse an ISO-8601 date or datetime string. Returns None if it doesn't parse."""
    if not raw or not raw.strip():
        return None
    raw = raw.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def resolve_stay(check_in: date, check_out: date | None = None) -> tuple[date, date]:
    """Fill in a missing check-out and reject ranges that are not strictly forward."""
    if check_out is None:
        check_out = check_in + ONE_NIGHT
    if check_out <= check_in:
        raise QueryValidationError(
            "Invalid date range",
            "Check-out date must be after check-in date",
        )
    return check_in, check_out


def parse_stay(check_in_raw: str | None, check_out_raw: str | None = None) -> tuple[date, date]:
    """Validate raw query values and return (check_in, check_out)."""
    if not check_in_raw:
        raise QueryValidationError(
            "Missing or invalid checkIn parameter",
            "Please provide a valid check-in date as ISO string: ?checkIn=2024-01-15",
        )
    check_in = parse_date(check_in_raw)
    if check_in is None:
        raise QueryValidationError(
            "Invalid checkIn date format",
            "Please provide checkIn as ISO date string (e.g., 2024-01-15)",
        )
    return resolve_stay(check_in, parse_date(check_out_raw))
