"""Booking wire models - the body handed to the booking-creation service.

Field names are snake_case in Python and camelCase on the wire; the booking
body is produced by ``BookingRequest.to_wire``.
"""

from datetime import date
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.app.models.common import PaymentMethod, TimeSlot


class WireModel(BaseModel):
    """Base for camelCase wire records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SerializedHotel(WireModel):
    """Hotel sub-record of a serialized day."""

    id: str
    name: str
    per_day: float


class SerializedPlace(WireModel):
    """Place sub-record of a serialized day."""

    place_id: str
    name: str
    time_slot: TimeSlot
    price: float


class SerializedDay(WireModel):
    """One day of the custom plan."""

    date: date
    hotel: SerializedHotel | None
    places: list[SerializedPlace]
    notes: str | None = None


class SerializedCar(WireModel):
    """Trip-wide car rental block."""

    car_id: str
    model: str
    provider_contact: str | None
    per_day: float


class BookingRequest(WireModel):
    """Body of POST /bookings."""

    destination_id: str | None
    start_date: date
    end_date: date
    guests: int
    custom_plan: list[SerializedDay]
    car_rental: SerializedCar | None = None
    total_cost: float
    payment_method: PaymentMethod | None = None

    def to_wire(self) -> dict[str, Any]:
        """JSON body for the booking service.

        Nested nulls are kept (e.g. `"hotel": null`); only the optional
        top-level carRental and paymentMethod are left out when unset.
        """
        omit = {
            name for name in ("car_rental", "payment_method") if getattr(self, name) is None
        }
        return self.model_dump(mode="json", by_alias=True, exclude=omit)


class BookingRecord(BaseModel):
    """Created booking as returned by the booking service."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    booking_id: str = Field(validation_alias=AliasChoices("bookingId", "booking_id", "id", "_id"))
    status: str | None = None
