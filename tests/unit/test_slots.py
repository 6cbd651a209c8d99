"""Tests for the slot assignment store."""

import pytest

from backend.app.models.catalog import Activity
from backend.app.models.common import TimeSlot
from backend.app.models.plan import TripPlan
from backend.app.planning.errors import PlanInputError
from backend.app.planning.slots import assign, count_for_day, is_assigned, unassign


def test_assign_stores_activity(two_day_plan: TripPlan, activity: Activity) -> None:
    """Test that assigning to an empty slot stores the activity."""
    plan = assign(two_day_plan, 0, TimeSlot.morning, activity)

    assert plan.activity_at(0, TimeSlot.morning) == activity
    assert is_assigned(plan, 0, TimeSlot.morning, "a1")
    assert two_day_plan.slots == ()  # original untouched


def test_assigning_same_activity_twice_clears_slot(
    two_day_plan: TripPlan, activity: Activity
) -> None:
    """Test toggle semantics: assign, assign again -> empty."""
    plan = assign(two_day_plan, 0, TimeSlot.morning, activity)
    plan = assign(plan, 0, TimeSlot.morning, activity)

    assert plan.activity_at(0, TimeSlot.morning) is None
    assert plan.slots == ()


def test_assigning_same_activity_three_times_occupies_slot(
    two_day_plan: TripPlan, activity: Activity
) -> None:
    """Test toggle semantics: assign x3 -> occupied."""
    plan = two_day_plan
    for _ in range(3):
        plan = assign(plan, 0, TimeSlot.morning, activity)

    assert is_assigned(plan, 0, TimeSlot.morning, "a1")
    assert len(plan.slots) == 1


def test_toggle_matches_by_id_not_identity(two_day_plan: TripPlan) -> None:
    """Test that a fresh copy of the same catalog record still toggles."""
    plan = assign(two_day_plan, 1, TimeSlot.evening, Activity(id="a1", name="Walk", price=10))
    plan = assign(plan, 1, TimeSlot.evening, Activity(id="a1", name="Walk", price=10))

    assert plan.activity_at(1, TimeSlot.evening) is None


def test_different_activity_replaces_occupant(
    two_day_plan: TripPlan, activity: Activity, other_activity: Activity
) -> None:
    """Test that a different activity overwrites without keeping the old one."""
    plan = assign(two_day_plan, 0, TimeSlot.morning, activity)
    plan = assign(plan, 0, TimeSlot.morning, other_activity)

    assert plan.activity_at(0, TimeSlot.morning) == other_activity
    assert not is_assigned(plan, 0, TimeSlot.morning, "a1")
    assert len(plan.slots) == 1


def test_same_activity_in_different_slots_is_independent(
    two_day_plan: TripPlan, activity: Activity
) -> None:
    """Test that keys are (day, slot): the same activity can sit in two keys."""
    plan = assign(two_day_plan, 0, TimeSlot.morning, activity)
    plan = assign(plan, 1, TimeSlot.morning, activity)
    plan = assign(plan, 0, TimeSlot.evening, activity)

    assert len(plan.slots) == 3
    assert count_for_day(plan, 0) == 2
    assert count_for_day(plan, 1) == 1


def test_unassign_removes_entry(two_day_plan: TripPlan, activity: Activity) -> None:
    """Test that unassign clears the slot."""
    plan = assign(two_day_plan, 0, TimeSlot.afternoon, activity)
    plan = unassign(plan, 0, TimeSlot.afternoon)

    assert plan.activity_at(0, TimeSlot.afternoon) is None


def test_unassign_empty_slot_is_noop(two_day_plan: TripPlan) -> None:
    """Test that unassigning an empty slot leaves the plan equal."""
    assert unassign(two_day_plan, 1, TimeSlot.evening) == two_day_plan


def test_count_for_day(
    three_day_plan: TripPlan, activity: Activity, other_activity: Activity
) -> None:
    """Test per-day slot counts."""
    plan = assign(three_day_plan, 0, TimeSlot.morning, activity)
    plan = assign(plan, 0, TimeSlot.afternoon, other_activity)
    plan = assign(plan, 2, TimeSlot.evening, activity)

    assert [count_for_day(plan, d) for d in range(3)] == [2, 0, 1]


def test_is_assigned_false_for_other_activity(two_day_plan: TripPlan, activity: Activity) -> None:
    """Test is_assigned checks the activity id."""
    plan = assign(two_day_plan, 0, TimeSlot.morning, activity)

    assert not is_assigned(plan, 0, TimeSlot.morning, "a2")
    assert not is_assigned(plan, 0, TimeSlot.evening, "a1")


@pytest.mark.parametrize("day", [-1, 2, 10])
def test_out_of_range_day_raises(two_day_plan: TripPlan, activity: Activity, day: int) -> None:
    """Test that day indices outside the window are rejected."""
    with pytest.raises(PlanInputError):
        assign(two_day_plan, day, TimeSlot.morning, activity)
    with pytest.raises(PlanInputError):
        unassign(two_day_plan, day, TimeSlot.morning)


def test_assign_on_empty_window_raises(activity: Activity) -> None:
    """Test that nothing can be assigned before the window has days."""
    with pytest.raises(PlanInputError):
        assign(TripPlan(), 0, TimeSlot.morning, activity)
