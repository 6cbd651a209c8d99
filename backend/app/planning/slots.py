"""Slot assignment store: (day, time slot) -> activity reducers.

All functions are pure; mutating ones return a new TripPlan.
"""

from backend.app.models.catalog import Activity
from backend.app.models.common import TimeSlot
from backend.app.models.plan import DaySlotKey, SlotEntry, TripPlan
from backend.app.planning.errors import PlanInputError


def check_day(plan: TripPlan, day: int) -> None:
    """Raise PlanInputError if day is not a valid index of the plan."""
    if not 0 <= day < plan.day_count:
        raise PlanInputError(f"Day {day + 1} is outside the trip ({plan.day_count} days)")


def assign(plan: TripPlan, day: int, slot: TimeSlot, activity: Activity) -> TripPlan:
    """Assign an activity to (day, slot).

    If the slot already holds this same activity (by id) it is cleared instead,
    so a second click on "Add" acts as "Remove". A different occupant is
    replaced.
    """
    check_day(plan, day)
    key = DaySlotKey(day=day, slot=slot)
    current = plan.activity_at(day, slot)

    remaining = tuple(entry for entry in plan.slots if entry.key != key)
    if current is not None and current.id == activity.id:
        return plan.model_copy(update={"slots": remaining})

    return plan.model_copy(update={"slots": (*remaining, SlotEntry(key=key, activity=activity))})


def unassign(plan: TripPlan, day: int, slot: TimeSlot) -> TripPlan:
    """Clear (day, slot) whatever occupies it."""
    check_day(plan, day)
    key = DaySlotKey(day=day, slot=slot)
    return plan.model_copy(
        update={"slots": tuple(entry for entry in plan.slots if entry.key != key)}
    )


def is_assigned(plan: TripPlan, day: int, slot: TimeSlot, activity_id: str) -> bool:
    """Whether activity_id currently occupies (day, slot)."""
    current = plan.activity_at(day, slot)
    return current is not None and current.id == activity_id


def count_for_day(plan: TripPlan, day: int) -> int:
    """Number of occupied slots on a day."""
    return len(plan.entries_for_day(day))
