"""Violation models - problems found while validating a trip plan."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from backend.app.models.common import PlanStep

# JSON-serializable value types for violation details
JsonValue = str | int | float | bool | None | dict[str, Any] | list[Any]


class ViolationSeverity(str, Enum):
    """Severity levels for plan violations."""

    ADVISORY = "advisory"
    BLOCKING = "blocking"


class ViolationKind(str, Enum):
    """Categories of plan checks."""

    WINDOW = "window"
    ACTIVITIES = "activities"
    HOTELS = "hotels"
    CAR = "car"
    PAYMENT = "payment"
    BUDGET = "budget"


class Violation(BaseModel):
    """A rule the current plan does not satisfy.

    Blocking violations stop the flow from advancing; advisory ones are
    surfaced but never block. Neither ever changes the plan.
    """

    kind: ViolationKind
    code: str  # Machine-usable short code, e.g., "DAYS_WITHOUT_HOTEL"
    message: str  # Human-readable, names offending days 1-based
    severity: ViolationSeverity
    step: PlanStep | None = None
    day_numbers: list[int] = Field(default_factory=list)  # 1-based for display
    details: dict[str, JsonValue] = Field(default_factory=dict)
