"""Day resource selector and other trip-level reducers.

Hotels are chosen per night (day index); the car is rented for the whole trip.
"""

from collections.abc import Iterable

from backend.app.models.catalog import Car, Destination, Hotel
from backend.app.models.common import PaymentMethod, PlanVariant
from backend.app.models.plan import TripPlan
from backend.app.planning.errors import PlanInputError
from backend.app.planning.slots import check_day


def set_hotel_for_day(plan: TripPlan, day: int, hotel: Hotel | None) -> TripPlan:
    """Select the hotel for one night, replacing any previous one. None clears it."""
    check_day(plan, day)
    hotels = dict(plan.hotels)
    if hotel is None:
        hotels.pop(day, None)
    else:
        hotels[day] = hotel
    return plan.model_copy(update={"hotels": hotels})


def set_car(plan: TripPlan, car: Car | None) -> TripPlan:
    """Select the trip-wide rental car. None clears it."""
    return plan.model_copy(update={"car": car})


def set_car_needed(plan: TripPlan, needed: bool) -> TripPlan:
    """Toggle whether the car counts toward cost and validation."""
    return plan.model_copy(update={"car_needed": needed})


def set_travelers(plan: TripPlan, travelers: int) -> TripPlan:
    if travelers < 1:
        raise PlanInputError("At least one traveler is required")
    return plan.model_copy(update={"travelers": travelers})


def set_hotel_flow(plan: TripPlan, active: bool) -> TripPlan:
    """Turn the per-night hotel selection step on or off."""
    return plan.model_copy(update={"hotel_flow": active})


def set_variant(plan: TripPlan, variant: PlanVariant) -> TripPlan:
    return plan.model_copy(update={"variant": variant})


def set_day_note(plan: TripPlan, day: int, text: str) -> TripPlan:
    """Set the free-text plan for a day. Blank text clears it."""
    check_day(plan, day)
    notes = dict(plan.day_notes)
    if text.strip():
        notes[day] = text.strip()
    else:
        notes.pop(day, None)
    return plan.model_copy(update={"day_notes": notes})


def set_payment_method(plan: TripPlan, method: PaymentMethod | None) -> TripPlan:
    return plan.model_copy(update={"payment_method": method})


def set_destination(plan: TripPlan, destination: Destination | None) -> TripPlan:
    if destination is None:
        return plan.model_copy(update={"destination_id": None, "destination_name": None})
    return plan.model_copy(
        update={"destination_id": destination.id, "destination_name": destination.name}
    )


def set_budget(plan: TripPlan, budget: float | None) -> TripPlan:
    if budget is not None and budget <= 0:
        raise PlanInputError("Budget must be positive")
    return plan.model_copy(update={"budget": budget})


def set_preferences(plan: TripPlan, preferences: Iterable[str]) -> TripPlan:
    """Replace travel preference themes (deduplicated, order kept)."""
    deduped: list[str] = []
    for pref in preferences:
        if pref and pref not in deduped:
            deduped.append(pref)
    return plan.model_copy(update={"preferences": tuple(deduped)})
