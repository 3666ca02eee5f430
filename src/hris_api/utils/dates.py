"""Calendar helpers shared by payroll and statistics."""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, time, timedelta

DAYS_PER_YEAR = 365


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def day_window(day: date) -> tuple[datetime, datetime]:
    """Return the half-open [midnight, next midnight) window of a local day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def count_working_days(start: date, end: date) -> int:
    """Count Monday-Friday days in the inclusive range."""
    return sum(1 for day in iter_days(start, end) if day.weekday() < 5)


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to server-local wall-clock time without tzinfo."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def age_in_years(date_of_birth: date, today: date) -> int:
    """Whole years lived, approximated as elapsed days / 365."""
    return (today - date_of_birth).days // DAYS_PER_YEAR


def one_year_before(day: date) -> date:
    """Same calendar day one year earlier (Feb 29 falls back to Feb 28)."""
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        return day.replace(year=day.year - 1, day=28)
