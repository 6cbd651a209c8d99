"""Catalog models - canonical shapes of externally-fetched reference data.

Records are read-only: the plan stores copies and never mutates them.
"""

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.common import CatalogCategory, Provenance, TimeSlot


class CatalogRecord(BaseModel):
    """Base for immutable catalog records."""

    model_config = ConfigDict(frozen=True)


class Activity(CatalogRecord):
    """Attraction/activity that can occupy a time slot."""

    id: str
    name: str
    duration_hours: float | None = None
    price: float | None = Field(default=None, ge=0)
    popular: bool | None = None
    category: str | None = None
    rating: float | None = None
    time_slot: TimeSlot | None = None  # preferred slot, advisory only
    image_url: str | None = None


class Hotel(CatalogRecord):
    """Hotel, booked per night."""

    id: str
    name: str
    price_per_night: float | None = Field(default=None, ge=0)
    location: str | None = None
    rating: float | None = None
    amenities: tuple[str, ...] = ()


class Car(CatalogRecord):
    """Rental car, booked for the whole trip."""

    id: str
    model: str
    price_per_day: float | None = Field(default=None, ge=0)
    provider_contact: str | None = None
    features: tuple[str, ...] = ()


class Destination(CatalogRecord):
    """Destination the trip is planned for."""

    id: str
    name: str
    city: str | None = None
    country: str | None = None
    tags: tuple[str, ...] = ()


CatalogItem = Activity | Hotel | Car | Destination


class CatalogResult(BaseModel):
    """Outcome of a catalog fetch.

    An unavailable catalog degrades to an empty list with a notice. A response
    that lost the race to a newer request for the same category is marked stale
    and carries no items.
    """

    category: CatalogCategory
    destination_id: str | None = None
    items: list[CatalogItem] = Field(default_factory=list)
    notice: str | None = None
    stale: bool = False
    provenance: Provenance | None = None
