"""Plan validator - guards for the planning flow state machine.

Steps run window -> activities -> hotels -> car -> confirm, one at a time in
either direction. Advancing past a step requires that step's guard and every
earlier one to pass, since selections can change after a step was first
passed. Guards never modify the plan.
"""

from collections.abc import Callable

from pydantic import BaseModel

from backend.app.models.common import STEP_ORDER, PlanStep, PlanVariant
from backend.app.models.plan import TripPlan
from backend.app.models.violations import Violation, ViolationKind, ViolationSeverity
from backend.app.planning.slots import count_for_day


class StepResult(BaseModel):
    """Outcome of a transition attempt."""

    step: PlanStep
    moved: bool
    violations: list[Violation]


def _day_list(day_numbers: list[int]) -> str:
    return ", ".join(str(n) for n in day_numbers)


def check_window(plan: TripPlan) -> list[Violation]:
    """Trip must span at least one day."""
    if plan.day_count > 0:
        return []
    return [
        Violation(
            kind=ViolationKind.WINDOW,
            code="INVALID_DATE_RANGE",
            message="Please select a valid date range (end date after start date).",
            severity=ViolationSeverity.BLOCKING,
            step=PlanStep.window,
        )
    ]


def check_activities(plan: TripPlan) -> list[Violation]:
    """Every day needs something planned.

    Slots variant: at least one occupied time slot. Freeform variant: non-empty
    plan text.
    """
    if plan.variant == PlanVariant.freeform:
        empty = [day + 1 for day in plan.window.day_indices if not plan.day_notes.get(day)]
        if not empty:
            return []
        return [
            Violation(
                kind=ViolationKind.ACTIVITIES,
                code="DAYS_WITHOUT_PLAN",
                message=f"Please add a plan for every day. Missing: Day {_day_list(empty)}.",
                severity=ViolationSeverity.BLOCKING,
                step=PlanStep.activities,
                day_numbers=empty,
            )
        ]

    empty = [day + 1 for day in plan.window.day_indices if count_for_day(plan, day) < 1]
    if not empty:
        return []
    return [
        Violation(
            kind=ViolationKind.ACTIVITIES,
            code="DAYS_WITHOUT_ACTIVITIES",
            message=f"Please add at least one activity for Day {_day_list(empty)}.",
            severity=ViolationSeverity.BLOCKING,
            step=PlanStep.activities,
            day_numbers=empty,
        )
    ]


def check_hotels(plan: TripPlan) -> list[Violation]:
    """With the hotel flow active, every night needs a hotel."""
    if not plan.hotel_flow:
        return []
    missing = [day + 1 for day in plan.window.day_indices if plan.hotels.get(day) is None]
    if not missing:
        return []
    return [
        Violation(
            kind=ViolationKind.HOTELS,
            code="DAYS_WITHOUT_HOTEL",
            message=f"Please select a hotel for Day {_day_list(missing)}.",
            severity=ViolationSeverity.BLOCKING,
            step=PlanStep.hotels,
            day_numbers=missing,
        )
    ]


def check_car(plan: TripPlan) -> list[Violation]:
    """A needed car must be selected."""
    if not plan.car_needed or plan.car is not None:
        return []
    return [
        Violation(
            kind=ViolationKind.CAR,
            code="CAR_NOT_SELECTED",
            message="Please select a rental car or mark the car as not needed.",
            severity=ViolationSeverity.BLOCKING,
            step=PlanStep.car,
        )
    ]


def check_payment(plan: TripPlan) -> list[Violation]:
    """Freeform bookings need a payment method at confirmation."""
    if plan.variant != PlanVariant.freeform or plan.payment_method is not None:
        return []
    return [
        Violation(
            kind=ViolationKind.PAYMENT,
            code="PAYMENT_METHOD_MISSING",
            message="Please select a payment method.",
            severity=ViolationSeverity.BLOCKING,
            step=PlanStep.confirm,
        )
    ]


STEP_GUARDS: dict[PlanStep, Callable[[TripPlan], list[Violation]]] = {
    PlanStep.window: check_window,
    PlanStep.activities: check_activities,
    PlanStep.hotels: check_hotels,
    PlanStep.car: check_car,
    PlanStep.confirm: check_payment,
}


def check_step(plan: TripPlan, step: PlanStep) -> list[Violation]:
    """Blocking violations that prevent leaving (or, for confirm, finalizing) a step.

    Runs the guard of every step up to and including ``step``.
    """
    violations: list[Violation] = []
    for current in STEP_ORDER[: STEP_ORDER.index(step) + 1]:
        violations.extend(STEP_GUARDS[current](plan))
    return violations


def can_confirm(plan: TripPlan) -> bool:
    """Whether the plan may be finalized and handed to the booking service."""
    return not check_step(plan, PlanStep.confirm)


def advance(plan: TripPlan, step: PlanStep) -> StepResult:
    """Try to move forward one step.

    confirm is terminal: advancing from it only re-checks the final guard.
    """
    violations = check_step(plan, step)
    if violations or step == PlanStep.confirm:
        return StepResult(step=step, moved=False, violations=violations)

    next_step = STEP_ORDER[STEP_ORDER.index(step) + 1]
    return StepResult(step=next_step, moved=True, violations=[])


def retreat(step: PlanStep) -> StepResult:
    """Move back one step. Always allowed except from the initial step."""
    index = STEP_ORDER.index(step)
    if index == 0:
        return StepResult(step=step, moved=False, violations=[])
    return StepResult(step=STEP_ORDER[index - 1], moved=True, violations=[])


def summarize(violations: list[Violation]) -> str:
    """Join violation messages into one user-facing message."""
    return " ".join(v.message for v in violations)
