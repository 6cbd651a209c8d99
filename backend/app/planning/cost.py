"""Cost aggregator - pure derivation of plan totals from its selections."""

from backend.app.config import get_settings
from backend.app.models.cost import CostBreakdown, DayCost
from backend.app.models.plan import TripPlan
from backend.app.models.violations import Violation, ViolationKind, ViolationSeverity


def _money(value: float) -> float:
    return round(value, 2)


def car_cost(plan: TripPlan) -> float:
    """Car price per day x trip days, only when a car is needed and selected."""
    if not plan.car_needed or plan.car is None:
        return 0.0
    return (plan.car.price_per_day or 0.0) * plan.day_count


def compute_cost(plan: TripPlan) -> CostBreakdown:
    """Compute the cost breakdown of a plan.

    total = sum of assigned activity prices
          + one night's hotel price per day with a hotel
          + car price per day x day count (if car needed and selected)

    Missing prices count as 0. Only in-window days contribute. The traveler
    count divides the total into per_traveler but does not scale it.
    """
    days: list[DayCost] = []
    activities_total = 0.0
    hotels_total = 0.0

    for day in plan.window.day_indices:
        day_activities = sum(
            entry.activity.price or 0.0 for entry in plan.entries_for_day(day)
        )
        hotel = plan.hotels.get(day)
        day_hotel = (hotel.price_per_night or 0.0) if hotel is not None else 0.0

        activities_total += day_activities
        hotels_total += day_hotel
        days.append(
            DayCost(
                day_index=day,
                date=plan.window.date_for(day),
                activities=_money(day_activities),
                hotel=_money(day_hotel),
                total=_money(day_activities + day_hotel),
            )
        )

    car_total = car_cost(plan)
    total = activities_total + hotels_total + car_total

    return CostBreakdown(
        activities=_money(activities_total),
        hotels=_money(hotels_total),
        car=_money(car_total),
        total=_money(total),
        per_traveler=_money(total / plan.travelers),
        days=days,
    )


def total_cost(plan: TripPlan) -> float:
    """Total plan cost."""
    return compute_cost(plan).total


def check_budget(plan: TripPlan) -> list[Violation]:
    """Compare plan total against the traveler's budget.

    Returns:
        Empty list if no budget or within budget; otherwise a single ADVISORY
        violation (NEAR_BUDGET within the advisory ratio, OVER_BUDGET beyond).
    """
    if plan.budget is None:
        return []

    total = total_cost(plan)
    if total <= plan.budget:
        return []

    ratio = total / plan.budget
    details: dict[str, float] = {
        "total": total,
        "budget": plan.budget,
        "ratio": round(ratio, 3),
    }

    if ratio <= get_settings().budget_advisory_ratio:
        return [
            Violation(
                kind=ViolationKind.BUDGET,
                code="NEAR_BUDGET",
                message="Total trip cost is slightly above the stated budget.",
                severity=ViolationSeverity.ADVISORY,
                details=details,
            )
        ]

    return [
        Violation(
            kind=ViolationKind.BUDGET,
            code="OVER_BUDGET",
            message="Total trip cost is well above the stated budget.",
            severity=ViolationSeverity.ADVISORY,
            details=details,
        )
    ]
