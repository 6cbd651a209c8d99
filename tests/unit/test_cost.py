"""Tests for the cost aggregator and budget advisories."""

from backend.app.models.catalog import Activity, Car, Hotel
from backend.app.models.common import TimeSlot
from backend.app.models.plan import TripPlan
from backend.app.models.violations import ViolationKind, ViolationSeverity
from backend.app.planning.cost import check_budget, compute_cost, total_cost
from backend.app.planning.dates import set_window
from backend.app.planning.resources import (
    set_budget,
    set_car,
    set_car_needed,
    set_hotel_for_day,
    set_travelers,
)
from backend.app.planning.slots import assign


def make_scenario_plan() -> TripPlan:
    """June 1 -> June 3, a1 (10) on day 0 morning, 100/night hotel both nights."""
    plan = set_window(TripPlan(), "2025-06-01", "2025-06-03")
    plan = assign(plan, 0, TimeSlot.morning, Activity(id="a1", name="Walk", price=10))
    hotel = Hotel(id="h1", name="Harbor Inn", price_per_night=100)
    plan = set_hotel_for_day(plan, 0, hotel)
    plan = set_hotel_for_day(plan, 1, hotel)
    return plan


def test_scenario_without_car() -> None:
    """Test total = 10 + 100 + 100."""
    cost = compute_cost(make_scenario_plan())

    assert cost.activities == 10
    assert cost.hotels == 200
    assert cost.car == 0
    assert cost.total == 210


def test_scenario_with_needed_car() -> None:
    """Test total = 210 + 50 x 2 when the car is needed."""
    plan = set_car(make_scenario_plan(), Car(id="c1", model="Compact", price_per_day=50))
    plan = set_car_needed(plan, True)

    cost = compute_cost(plan)

    assert cost.car == 100
    assert cost.total == 310


def test_car_ignored_when_not_needed(car: Car) -> None:
    """Test that a selected car adds nothing unless it is needed."""
    plan = set_car(make_scenario_plan(), car)

    assert total_cost(plan) == 210


def test_car_needed_without_selection_adds_nothing() -> None:
    """Test that car_needed alone does not add cost."""
    plan = set_car_needed(make_scenario_plan(), True)

    assert total_cost(plan) == 210


def test_missing_prices_count_as_zero(two_day_plan: TripPlan) -> None:
    """Test that records without prices contribute nothing."""
    plan = assign(two_day_plan, 0, TimeSlot.morning, Activity(id="free", name="Beach"))
    plan = set_hotel_for_day(plan, 0, Hotel(id="h0", name="Friend's flat"))
    plan = set_car(plan, Car(id="c0", model="Borrowed"))
    plan = set_car_needed(plan, True)

    cost = compute_cost(plan)

    assert cost.total == 0


def test_per_day_breakdown() -> None:
    """Test that per-day costs carry dates and sum to the non-car total."""
    cost = compute_cost(make_scenario_plan())

    assert [d.date.isoformat() for d in cost.days] == ["2025-06-01", "2025-06-02"]
    assert [d.total for d in cost.days] == [110, 100]
    assert sum(d.total for d in cost.days) + cost.car == cost.total


def test_travelers_divide_but_do_not_scale_total() -> None:
    """Test per-traveler share."""
    plan = set_travelers(make_scenario_plan(), 3)

    cost = compute_cost(plan)

    assert cost.total == 210
    assert cost.per_traveler == 70


def test_total_independent_of_selection_history(hotel: Hotel, other_hotel: Hotel) -> None:
    """Test that select A, remove, select B equals selecting B directly."""
    base = set_window(TripPlan(), "2025-06-01", "2025-06-03")

    winding = set_hotel_for_day(base, 0, hotel)
    winding = set_hotel_for_day(winding, 0, None)
    winding = set_hotel_for_day(winding, 0, other_hotel)

    direct = set_hotel_for_day(base, 0, other_hotel)

    assert compute_cost(winding) == compute_cost(direct)


def test_total_independent_of_assignment_order(
    two_day_plan: TripPlan, activity: Activity, other_activity: Activity
) -> None:
    """Test that the order of independent assignments does not matter."""
    forward = assign(two_day_plan, 0, TimeSlot.morning, activity)
    forward = assign(forward, 1, TimeSlot.evening, other_activity)

    backward = assign(two_day_plan, 1, TimeSlot.evening, other_activity)
    backward = assign(backward, 0, TimeSlot.morning, activity)

    assert total_cost(forward) == total_cost(backward) == 45


def test_compute_cost_is_idempotent() -> None:
    """Test that recomputing gives the same result."""
    plan = make_scenario_plan()

    assert compute_cost(plan) == compute_cost(plan)


def test_empty_plan_costs_nothing() -> None:
    """Test cost of a plan with no days."""
    cost = compute_cost(TripPlan())

    assert cost.total == 0
    assert cost.days == []


def test_no_budget_no_advisory() -> None:
    """Test that without a budget nothing is reported."""
    assert check_budget(make_scenario_plan()) == []


def test_within_budget_no_advisory() -> None:
    """Test total <= budget."""
    assert check_budget(set_budget(make_scenario_plan(), 210)) == []


def test_slightly_over_budget_is_near_budget() -> None:
    """Test 210 against 200 (5% over)."""
    violations = check_budget(set_budget(make_scenario_plan(), 200))

    assert len(violations) == 1
    assert violations[0].code == "NEAR_BUDGET"
    assert violations[0].kind == ViolationKind.BUDGET
    assert violations[0].severity == ViolationSeverity.ADVISORY


def test_far_over_budget_is_over_budget() -> None:
    """Test 210 against 100 (110% over) is still only advisory."""
    violations = check_budget(set_budget(make_scenario_plan(), 100))

    assert len(violations) == 1
    assert violations[0].code == "OVER_BUDGET"
    assert violations[0].severity == ViolationSeverity.ADVISORY
    assert violations[0].details["ratio"] == 2.1
