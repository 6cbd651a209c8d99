"""Planning session - the single owner of one TripPlan.

Holds the current plan, the flow step and an undo history. Reducers from the
planning modules are applied through ``apply`` so every change is undoable.
"""

import logging
import uuid
from collections import deque
from collections.abc import Callable
from typing import Any

from backend.app.adapters.catalog import LatestRequestGate
from backend.app.models.common import PlanStep
from backend.app.models.plan import TripPlan
from backend.app.models.violations import Violation
from backend.app.planning import validator
from backend.app.utils.metrics import plan_transitions_total

logger = logging.getLogger(__name__)


class PlanningSession:
    """One user's planning flow."""

    def __init__(self, plan: TripPlan | None = None, *, undo_depth: int = 50) -> None:
        self.session_id = uuid.uuid4()
        self.plan = plan if plan is not None else TripPlan()
        self.step = PlanStep.window
        self.catalog_gate = LatestRequestGate()
        self._history: deque[TripPlan] = deque(maxlen=undo_depth)

    def apply(
        self,
        reducer: Callable[..., TripPlan],
        *args: Any,
        **kwargs: Any,
    ) -> TripPlan:
        """Run a reducer on the current plan and keep the old plan for undo.

        If the reducer raises, the plan is left unchanged.
        """
        new_plan = reducer(self.plan, *args, **kwargs)
        if new_plan != self.plan:
            self._history.append(self.plan)
            self.plan = new_plan
        return self.plan

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def undo(self) -> bool:
        """Restore the previous plan. Returns False when there is nothing to undo."""
        if not self._history:
            return False
        self.plan = self._history.pop()
        return True

    def advance(self) -> validator.StepResult:
        """Move to the next step if the current step's guards pass."""
        result = validator.advance(self.plan, self.step)
        outcome = "advanced" if result.moved else "blocked"
        plan_transitions_total.labels(step=self.step.value, outcome=outcome).inc()
        if result.violations:
            logger.info(
                f"[session] session_id={self.session_id} step={self.step.value} blocked "
                f"codes={[v.code for v in result.violations]}"
            )
        self.step = result.step
        return result

    def back(self) -> validator.StepResult:
        """Move to the previous step."""
        result = validator.retreat(self.step)
        plan_transitions_total.labels(
            step=self.step.value, outcome="back" if result.moved else "noop"
        ).inc()
        self.step = result.step
        return result

    def violations(self) -> list[Violation]:
        """Blocking violations for the current step."""
        return validator.check_step(self.plan, self.step)

    def snapshot(self) -> dict[str, Any]:
        return {
            "session_id": str(self.session_id),
            "step": self.step.value,
            "can_undo": self.can_undo,
        }
