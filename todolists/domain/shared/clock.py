"""Local wall-clock helpers.

All day-level comparisons happen in the local timezone. Naive datetimes are
interpreted as local time; aware ones are converted to it.
"""

from datetime import date, datetime, time, timedelta


def local_now() -> datetime:
    """Return the current instant as an aware datetime in the local zone."""
    return datetime.now().astimezone()


def to_local(moment: datetime) -> datetime:
    """Return ``moment`` as an aware datetime in the local zone."""
    return moment.astimezone()


def day_of(moment: datetime) -> date:
    """Truncate a timestamp to its local calendar day."""
    return to_local(moment).date()


def start_of_day(moment: datetime) -> datetime:
    """Return local midnight at the start of the day containing ``moment``."""
    local = to_local(moment)
    return datetime.combine(local.date(), time.min, tzinfo=local.tzinfo)


def days_from(moment: datetime, days: int) -> date:
    """Return the local calendar day ``days`` days after the day of ``moment``."""
    return day_of(moment) + timedelta(days=days)
