"""Models package - re-exports for convenience."""

from backend.app.models.booking import (
    BookingRecord,
    BookingRequest,
    SerializedCar,
    SerializedDay,
    SerializedHotel,
    SerializedPlace,
)
from backend.app.models.catalog import (
    Activity,
    Car,
    CatalogItem,
    CatalogResult,
    Destination,
    Hotel,
)
from backend.app.models.common import (
    SLOT_ORDER,
    STEP_ORDER,
    CatalogCategory,
    PaymentMethod,
    PlanStep,
    PlanVariant,
    Provenance,
    TimeSlot,
)
from backend.app.models.cost import CostBreakdown, DayCost
from backend.app.models.plan import DaySlotKey, SlotEntry, TripPlan, TripWindow
from backend.app.models.violations import Violation, ViolationKind, ViolationSeverity

__all__ = [
    # Common
    "TimeSlot",
    "SLOT_ORDER",
    "PlanStep",
    "STEP_ORDER",
    "PlanVariant",
    "PaymentMethod",
    "CatalogCategory",
    "Provenance",
    # Catalog
    "Activity",
    "Hotel",
    "Car",
    "Destination",
    "CatalogItem",
    "CatalogResult",
    # Plan
    "TripWindow",
    "DaySlotKey",
    "SlotEntry",
    "TripPlan",
    # Cost
    "CostBreakdown",
    "DayCost",
    # Violations
    "Violation",
    "ViolationKind",
    "ViolationSeverity",
    # Booking wire format
    "BookingRequest",
    "BookingRecord",
    "SerializedDay",
    "SerializedHotel",
    "SerializedPlace",
    "SerializedCar",
]
