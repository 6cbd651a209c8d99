"""Plan serializer - TripPlan to the booking-creation wire format."""

from backend.app.models.booking import (
    BookingRequest,
    SerializedCar,
    SerializedDay,
    SerializedHotel,
    SerializedPlace,
)
from backend.app.models.common import SLOT_ORDER, PlanStep
from backend.app.models.plan import TripPlan
from backend.app.planning.cost import total_cost
from backend.app.planning.errors import PlanIncompleteError
from backend.app.planning.validator import check_step, summarize


def serialize_day(plan: TripPlan, day: int) -> SerializedDay:
    """Serialize one day: date, hotel, places in slot order, notes."""
    hotel = plan.hotels.get(day)
    places: list[SerializedPlace] = []
    for slot in SLOT_ORDER:
        activity = plan.activity_at(day, slot)
        if activity is None:
            continue
        places.append(
            SerializedPlace(
                place_id=activity.id,
                name=activity.name,
                time_slot=slot,
                price=activity.price or 0.0,
            )
        )

    return SerializedDay(
        date=plan.window.date_for(day),
        hotel=(
            SerializedHotel(id=hotel.id, name=hotel.name, per_day=hotel.price_per_night or 0.0)
            if hotel is not None
            else None
        ),
        places=places,
        notes=plan.day_notes.get(day),
    )


def serialize_plan(plan: TripPlan) -> list[SerializedDay]:
    """Day-keyed custom plan, one entry per day of the window."""
    return [serialize_day(plan, day) for day in plan.window.day_indices]


def serialize_car(plan: TripPlan) -> SerializedCar | None:
    """Trip-wide car block; None unless a car is needed and selected."""
    if not plan.car_needed or plan.car is None:
        return None
    return SerializedCar(
        car_id=plan.car.id,
        model=plan.car.model,
        provider_contact=plan.car.provider_contact,
        per_day=plan.car.price_per_day or 0.0,
    )


def build_booking_request(plan: TripPlan) -> BookingRequest:
    """Build the POST /bookings body for a finished plan.

    Raises:
        PlanIncompleteError: If the plan does not pass the confirm guard
    """
    violations = check_step(plan, PlanStep.confirm)
    start_date, end_date = plan.window.start_date, plan.window.end_date
    if violations or start_date is None or end_date is None:
        raise PlanIncompleteError(summarize(violations), violations)

    return BookingRequest(
        destination_id=plan.destination_id,
        start_date=start_date,
        end_date=end_date,
        guests=plan.travelers,
        custom_plan=serialize_plan(plan),
        car_rental=serialize_car(plan),
        total_cost=total_cost(plan),
        payment_method=plan.payment_method,
    )
