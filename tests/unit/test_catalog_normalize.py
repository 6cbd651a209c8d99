"""Tests for catalog record normalization."""

from backend.app.adapters.normalize import (
    normalize_activity,
    normalize_car,
    normalize_destination,
    normalize_hotel,
    normalize_items,
)
from backend.app.models.catalog import Hotel
from backend.app.models.common import CatalogCategory, TimeSlot


def test_activity_field_variants() -> None:
    """Test place records using the catalog's alternate field names."""
    activity = normalize_activity(
        {
            "_id": "64f0c1",
            "place_name": "Fort Aguada",
            "price": "15.5",
            "popularityFlag": True,
            "durationHours": 2,
            "timeSlot": "Evening",
            "type": "history",
        }
    )

    assert activity is not None
    assert activity.id == "64f0c1"
    assert activity.name == "Fort Aguada"
    assert activity.price == 15.5
    assert activity.popular is True
    assert activity.duration_hours == 2
    assert activity.time_slot == TimeSlot.evening
    assert activity.category == "history"


def test_activity_bad_values_become_none() -> None:
    """Test that unusable prices and slots are dropped, not fatal."""
    activity = normalize_activity(
        {"id": 7, "name": "Market", "price": -3, "time_slot": "midnight", "rating": "n/a"}
    )

    assert activity is not None
    assert activity.id == "7"
    assert activity.price is None
    assert activity.time_slot is None
    assert activity.rating is None


def test_hotel_price_aliases_and_location_fallback() -> None:
    """Test perDay price and city/country location."""
    hotel = normalize_hotel(
        {"_id": "h9", "name": "Casa Azul", "perDay": 80, "city": "Panaji", "country": "India"}
    )

    assert hotel == Hotel(id="h9", name="Casa Azul", price_per_night=80, location="Panaji, India")


def test_hotel_prefers_price_per_night() -> None:
    """Test alias precedence."""
    hotel = normalize_hotel({"id": "h1", "name": "Inn", "pricePerNight": 120, "price": 999})

    assert hotel is not None
    assert hotel.price_per_night == 120


def test_car_record() -> None:
    """Test car rental fields."""
    car = normalize_car(
        {
            "_id": "c3",
            "name": "SUV",
            "pricePerDay": 65,
            "providerContact": "rentals@example.com",
            "features": ["AC", "GPS", None],
        }
    )

    assert car is not None
    assert car.model == "SUV"
    assert car.price_per_day == 65
    assert car.provider_contact == "rentals@example.com"
    assert car.features == ("AC", "GPS")


def test_destination_record() -> None:
    destination = normalize_destination({"_id": "d1", "name": "Goa", "country": "India"})

    assert destination is not None
    assert destination.name == "Goa"
    assert destination.country == "India"


def test_records_without_id_or_name_are_skipped() -> None:
    """Test that malformed records are skipped and the rest kept."""
    items = normalize_items(
        CatalogCategory.hotels,
        [{"name": "No id"}, {"_id": "x"}, "junk", {"_id": "h1", "name": "Inn"}],
    )

    assert [item.id for item in items] == ["h1"]


def test_non_list_body_is_empty() -> None:
    """Test a response body that is not a list."""
    assert normalize_items(CatalogCategory.places, {"error": "oops"}) == []


def test_popularity_flag_parsing() -> None:
    """Test that only real booleans and true/false strings count as flags."""

    def popular(value: object) -> bool | None:
        activity = normalize_activity({"_id": "p", "name": "P", "popularityFlag": value})
        assert activity is not None
        return activity.popular

    assert popular(True) is True
    assert popular(False) is False
    assert popular("false") is False
    assert popular(" TRUE ") is True
    assert popular("0") is None
    assert popular(1) is None
