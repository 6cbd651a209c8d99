"""Schedule suggester - fill empty time slots from an activity catalog.

Scores activities against the plan's travel preferences and places the best
ones into open slots day by day, honoring each activity's preferred time slot.
"""

import logging
from collections.abc import Sequence

from backend.app.models.catalog import Activity
from backend.app.models.common import SLOT_ORDER
from backend.app.models.plan import TripPlan
from backend.app.planning.slots import assign

logger = logging.getLogger(__name__)


def score_activity(activity: Activity, *, preferences: Sequence[str]) -> float:
    """Score an activity for suggestion, typically in [0, 1].

    Components:
    1. Preference match: category equals one of the travel preferences
    2. Rating: scaled from a 0-5 rating
    3. Popularity flag
    """
    score = 0.3

    wanted = {p.lower() for p in preferences}
    if activity.category and activity.category.lower() in wanted:
        score += 0.4

    if activity.rating is not None:
        score += 0.2 * max(0.0, min(activity.rating, 5.0)) / 5.0

    if activity.popular:
        score += 0.1

    return max(0.0, min(1.0, score))


def suggest_schedule(plan: TripPlan, activities: Sequence[Activity]) -> TripPlan:
    """Return a plan with empty slots filled from ``activities``.

    Occupied slots are never touched and an activity already in the plan is
    not suggested again. Each activity is used at most once per trip and only
    in its preferred time slot when it has one.
    """
    used = {entry.activity.id for entry in plan.slots}
    ranked = sorted(
        (a for a in activities if a.id not in used),
        key=lambda a: (-score_activity(a, preferences=plan.preferences), a.id),
    )

    filled = 0
    for day in plan.window.day_indices:
        for slot in SLOT_ORDER:
            if plan.activity_at(day, slot) is not None:
                continue
            pick = next(
                (
                    a
                    for a in ranked
                    if a.id not in used and (a.time_slot is None or a.time_slot == slot)
                ),
                None,
            )
            if pick is None:
                continue
            plan = assign(plan, day, slot, pick)
            used.add(pick.id)
            filled += 1

    logger.info(
        f"[suggest_schedule] filled={filled} candidates={len(ranked)} days={plan.day_count}"
    )
    return plan
