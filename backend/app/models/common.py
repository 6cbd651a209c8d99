"""Common types and enums shared across all models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class TimeSlot(str, Enum):
    """Unit of attraction scheduling within a day."""

    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"


# Display and serialization order
SLOT_ORDER: tuple[TimeSlot, ...] = (TimeSlot.morning, TimeSlot.afternoon, TimeSlot.evening)


class PlanStep(str, Enum):
    """Steps of the planning flow, in order."""

    window = "window"
    activities = "activities"
    hotels = "hotels"
    car = "car"
    confirm = "confirm"


STEP_ORDER: tuple[PlanStep, ...] = (
    PlanStep.window,
    PlanStep.activities,
    PlanStep.hotels,
    PlanStep.car,
    PlanStep.confirm,
)


class PlanVariant(str, Enum):
    """Which day-planning model populates the plan."""

    slots = "slots"  # time-slotted activities + hotel/car selection
    freeform = "freeform"  # one free-text plan per day + payment method


class PaymentMethod(str, Enum):
    """Payment method chosen at confirmation."""

    credit_card = "Credit Card"
    debit_card = "Debit Card"
    upi = "UPI"
    paypal = "PayPal"


class CatalogCategory(str, Enum):
    """Catalog collections served by the catalog service."""

    destinations = "destinations"
    hotels = "hotels"
    cars = "cars"
    places = "places"


class Provenance(BaseModel):
    """Provenance metadata for catalog results."""

    source: str  # e.g. "catalog.hotels"
    source_url: str | None = None
    fetched_at: datetime
