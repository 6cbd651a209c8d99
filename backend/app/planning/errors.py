"""Exception types for trip planning."""

from backend.app.models.violations import Violation


class TripPlanError(Exception):
    """Base class for planning errors."""

    pass


class PlanInputError(TripPlanError):
    """Operation received input outside the plan's bounds (e.g. bad day index)."""

    pass


class PlanIncompleteError(TripPlanError):
    """Plan failed validation and cannot be finalized."""

    def __init__(self, message: str, violations: list[Violation]) -> None:
        super().__init__(message)
        self.violations = violations
