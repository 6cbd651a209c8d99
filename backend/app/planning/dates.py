"""Date-range resolver: trip start/end strings to day count and day dates."""

import math
from datetime import date, datetime, timedelta

from backend.app.models.plan import TripPlan, TripWindow

SECONDS_PER_DAY = 24 * 60 * 60

DateInput = str | date | datetime | None


def _parse(value: DateInput) -> datetime | None:
    """Parse a date-ish value; None when missing or unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def resolve_window(start: DateInput, end: DateInput) -> TripWindow:
    """Resolve a trip window from two date values.

    day_count = ceil((end - start) in days). Missing or unparseable input, or
    end <= start, gives the empty window. Never raises.
    """
    start_dt = _parse(start)
    end_dt = _parse(end)
    if start_dt is None or end_dt is None:
        return TripWindow()

    # Naive vs aware can't be subtracted; treat as unparseable
    if (start_dt.tzinfo is None) != (end_dt.tzinfo is None):
        return TripWindow()

    seconds = (end_dt - start_dt).total_seconds()
    if seconds <= 0:
        return TripWindow()

    return TripWindow(
        start_date=start_dt.date(),
        end_date=end_dt.date(),
        day_count=math.ceil(seconds / SECONDS_PER_DAY),
    )


def day_count(start: DateInput, end: DateInput) -> int:
    """Inclusive day count for a date range (0 when invalid)."""
    return resolve_window(start, end).day_count


def day_dates(window: TripWindow) -> list[date]:
    """Calendar date for each day index of the window."""
    if window.start_date is None:
        return []
    return [window.start_date + timedelta(days=i) for i in window.day_indices]


def set_window(plan: TripPlan, start: DateInput, end: DateInput) -> TripPlan:
    """Return a plan with a new date range.

    Selections at day indices beyond the new day count are dropped; those
    within it are kept.
    """
    window = resolve_window(start, end)
    count = window.day_count
    return plan.model_copy(
        update={
            "window": window,
            "slots": tuple(entry for entry in plan.slots if entry.key.day < count),
            "hotels": {day: hotel for day, hotel in plan.hotels.items() if day < count},
            "day_notes": {day: note for day, note in plan.day_notes.items() if day < count},
        }
    )
