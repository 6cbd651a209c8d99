"""Plan models - the in-memory trip plan owned by one planning session."""

from datetime import date, timedelta
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.app.models.catalog import Activity, Car, Hotel
from backend.app.models.common import PaymentMethod, PlanVariant, TimeSlot


class TripWindow(BaseModel):
    """Resolved trip date range.

    Built by the date-range resolver only; an unresolvable range is the empty
    window (no dates, zero days).
    """

    model_config = ConfigDict(frozen=True)

    start_date: date | None = None
    end_date: date | None = None
    day_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_dates_present(self) -> "TripWindow":
        """Ensure a non-empty window has both dates."""
        if self.day_count > 0 and (self.start_date is None or self.end_date is None):
            raise ValueError("day_count > 0 requires start_date and end_date")
        return self

    @property
    def day_indices(self) -> range:
        return range(self.day_count)

    def date_for(self, day: int) -> date:
        """Calendar date of a day index (start_date + day days)."""
        if self.start_date is None or not 0 <= day < self.day_count:
            raise IndexError(f"day {day} outside window of {self.day_count} days")
        return self.start_date + timedelta(days=day)


class DaySlotKey(BaseModel):
    """Composite key into the slot assignment store."""

    model_config = ConfigDict(frozen=True)

    day: Annotated[int, Field(ge=0)]
    slot: TimeSlot


class SlotEntry(BaseModel):
    """One occupied slot."""

    model_config = ConfigDict(frozen=True)

    key: DaySlotKey
    activity: Activity


class TripPlan(BaseModel):
    """All user selections for one planning session.

    Frozen: every reducer returns a new TripPlan. Totals are always derived
    (see planning.cost), never stored here.
    """

    model_config = ConfigDict(frozen=True)

    window: TripWindow = Field(default_factory=TripWindow)
    slots: tuple[SlotEntry, ...] = ()
    hotels: dict[int, Hotel] = Field(default_factory=dict)
    car: Car | None = None
    car_needed: bool = False
    travelers: Annotated[int, Field(ge=1)] = 2
    hotel_flow: bool = True
    variant: PlanVariant = PlanVariant.slots
    day_notes: dict[int, str] = Field(default_factory=dict)
    payment_method: PaymentMethod | None = None
    destination_id: str | None = None
    destination_name: str | None = None
    budget: Annotated[float, Field(gt=0)] | None = None
    preferences: tuple[str, ...] = ()

    @model_validator(mode="after")
    def validate_unique_slot_keys(self) -> "TripPlan":
        """Ensure at most one activity per (day, slot)."""
        seen: set[DaySlotKey] = set()
        for entry in self.slots:
            if entry.key in seen:
                raise ValueError(f"duplicate slot assignment for {entry.key}")
            seen.add(entry.key)
        return self

    @property
    def day_count(self) -> int:
        return self.window.day_count

    def activity_at(self, day: int, slot: TimeSlot) -> Activity | None:
        """Activity occupying (day, slot), if any."""
        for entry in self.slots:
            if entry.key.day == day and entry.key.slot == slot:
                return entry.activity
        return None

    def entries_for_day(self, day: int) -> list[SlotEntry]:
        return [entry for entry in self.slots if entry.key.day == day]
