# projects/collection_email/week.py
"""
Default collection handle from the calendar.
Each week's collection is named week-<ISO week>-<suffix>, e.g. week-4-plants.
"""
import math
from datetime import date, datetime, timedelta, timezone

from .config import HANDLE_SUFFIX, LEAD_DAYS


def iso_week_number(day: date) -> int:
    """
    ISO-8601 week number of `day`.

    Shift to the Thursday of the same Monday-based week; the week number is
    that Thursday's day-of-year (Jan 1 = 1) divided by 7, rounded up.
    """
    thursday = day + timedelta(days=4 - day.isoweekday())
    day_of_year = (thursday - date(thursday.year, 1, 1)).days + 1
    return math.ceil(day_of_year / 7)


class HandleResolver:
    """Picks the collection handle for a run."""

    def __init__(self, suffix: str = HANDLE_SUFFIX, lead_days: int = LEAD_DAYS):
        self.suffix = suffix
        self.lead_days = lead_days

    def resolve(self, explicit_handle: str = None, now: datetime = None) -> str:
        """Return `explicit_handle` untouched if given, else the handle for `lead_days` from `now` (UTC)."""
        if explicit_handle:
            return explicit_handle

        target = _as_utc(now) + timedelta(days=self.lead_days)
        return f"week-{iso_week_number(target.date())}-{self.suffix}"


def _as_utc(now: datetime = None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)
