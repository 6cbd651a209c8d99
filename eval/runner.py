"""Eval runner - builds plans from YAML scenarios and checks predicates."""

import sys
from pathlib import Path
from typing import Any

import yaml

from backend.app.models import Activity, Car, Hotel, PlanStep, TimeSlot, TripPlan
from backend.app.planning.cost import compute_cost
from backend.app.planning.dates import day_dates, set_window
from backend.app.planning.resources import set_car, set_car_needed, set_hotel_for_day
from backend.app.planning.serializer import serialize_plan
from backend.app.planning.slots import assign
from backend.app.planning.validator import check_step

SCENARIOS_PATH = Path(__file__).parent / "scenarios.yaml"


def load_scenarios(path: Path = SCENARIOS_PATH) -> dict[str, Any]:
    """Load scenarios from YAML."""
    with open(path) as f:
        result: dict[str, Any] = yaml.safe_load(f)
        return result


def build_plan_from_yaml(scenario: dict[str, Any]) -> TripPlan:
    """Build a TripPlan by replaying the scenario's selections."""
    window = scenario["window"]
    plan = set_window(TripPlan(), window.get("start"), window.get("end"))

    for entry in scenario.get("activities", []):
        plan = assign(plan, entry["day"], TimeSlot(entry["slot"]), Activity(**entry["activity"]))

    for entry in scenario.get("hotels", []):
        plan = set_hotel_for_day(plan, entry["day"], Hotel(**entry["hotel"]))

    if scenario.get("car"):
        plan = set_car(plan, Car(**scenario["car"]))
    plan = set_car_needed(plan, bool(scenario.get("car_needed", False)))

    return plan


def evaluate_predicates(plan: TripPlan, predicates: list[dict[str, str]]) -> tuple[int, int]:
    """Evaluate predicates; return (passed, total)."""
    passed = 0
    total = len(predicates)
    env = {
        "plan": plan,
        "cost": compute_cost(plan),
        "serialized": serialize_plan(plan),
        "day_dates": day_dates(plan.window),
        "blocked": lambda step: [
            n for v in check_step(plan, PlanStep(step)) for n in v.day_numbers
        ],
        "codes": lambda step: [v.code for v in check_step(plan, PlanStep(step))],
        "len": len,
    }

    for pred_data in predicates:
        predicate = pred_data["predicate"]
        description = pred_data.get("description", predicate)
        try:
            result = eval(predicate, {"__builtins__": {}}, env)
            if result:
                passed += 1
                print(f"  ✓ PASS: {description}")
            else:
                print(f"  ✗ FAIL: {description}")
        except Exception as e:
            print(f"  ✗ ERROR: {description} - {e}")

    return passed, total


def main() -> int:
    """Run eval scenarios."""
    scenarios_data = load_scenarios()
    scenarios = scenarios_data["scenarios"]

    total_passed = 0
    total_predicates = 0

    for scenario in scenarios:
        scenario_id = scenario["scenario_id"]
        description = scenario["description"]
        print(f"\n=== Scenario: {scenario_id} ===")
        print(f"Description: {description}")

        plan = build_plan_from_yaml(scenario)

        predicates = scenario["must_satisfy"]
        passed, total = evaluate_predicates(plan, predicates)
        total_passed += passed
        total_predicates += total

        print(f"Result: {passed}/{total} predicates passed")

    print("\n=== Summary ===")
    print(f"Total: {total_passed}/{total_predicates} predicates passed")

    if total_passed < total_predicates:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
