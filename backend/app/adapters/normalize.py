"""Catalog normalization - raw catalog JSON to canonical catalog models.

The catalog service is not consistent about field names (``_id`` vs ``id``,
``price`` vs ``pricePerNight`` vs ``perDay``...). All of that is resolved
here so the planner only ever sees Activity/Hotel/Car/Destination.
"""

import logging
from typing import Any

from backend.app.models.catalog import Activity, Car, CatalogItem, Destination, Hotel
from backend.app.models.common import CatalogCategory, TimeSlot

logger = logging.getLogger(__name__)


def _first(raw: dict[str, Any], *keys: str) -> Any:
    """First present, non-null value among keys."""
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return None


def _text(raw: dict[str, Any], *keys: str) -> str | None:
    value = _first(raw, *keys)
    return str(value) if value is not None else None


def _price(raw: dict[str, Any], *keys: str) -> float | None:
    """Non-negative price; None when missing or not a number."""
    value = _first(raw, *keys)
    if value is None or isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    return price if price >= 0 else None


def _number(raw: dict[str, Any], *keys: str) -> float | None:
    value = _first(raw, *keys)
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _strings(raw: dict[str, Any], key: str) -> tuple[str, ...]:
    value = raw.get(key)
    if not isinstance(value, list):
        return ()
    return tuple(str(v) for v in value if v is not None)


def _flag(raw: dict[str, Any], *keys: str) -> bool | None:
    """Boolean flag; accepts real bools and "true"/"false" strings, else None."""
    value = _first(raw, *keys)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return {"true": True, "false": False}.get(value.strip().lower())
    return None


def _time_slot(raw: dict[str, Any]) -> TimeSlot | None:
    value = _first(raw, "time_slot", "timeSlot")
    if not isinstance(value, str):
        return None
    try:
        return TimeSlot(value.strip().lower())
    except ValueError:
        return None


def _record_id(raw: dict[str, Any]) -> str | None:
    value = _first(raw, "_id", "id")
    return str(value) if value is not None else None


def normalize_activity(raw: dict[str, Any]) -> Activity | None:
    """Place/attraction record to Activity."""
    record_id = _record_id(raw)
    name = _first(raw, "place_name", "name", "title")
    if record_id is None or name is None:
        return None

    return Activity(
        id=record_id,
        name=str(name),
        duration_hours=_number(raw, "duration_hours", "durationHours"),
        price=_price(raw, "price", "cost"),
        popular=_flag(raw, "popular", "popularityFlag", "is_popular"),
        category=_text(raw, "category", "type"),
        rating=_number(raw, "rating", "ratingValue"),
        time_slot=_time_slot(raw),
        image_url=_text(raw, "image_url", "imageUrl", "image"),
    )


def normalize_hotel(raw: dict[str, Any]) -> Hotel | None:
    """Hotel record to Hotel."""
    record_id = _record_id(raw)
    name = _first(raw, "name")
    if record_id is None or name is None:
        return None

    location = _text(raw, "location")
    if location is None:
        parts = [p for p in (raw.get("city"), raw.get("country")) if p]
        location = ", ".join(parts) if parts else None

    return Hotel(
        id=record_id,
        name=str(name),
        price_per_night=_price(raw, "pricePerNight", "price_per_night", "perDay", "price"),
        location=location,
        rating=_number(raw, "rating"),
        amenities=_strings(raw, "amenities"),
    )


def normalize_car(raw: dict[str, Any]) -> Car | None:
    """Car rental record to Car."""
    record_id = _record_id(raw)
    model = _first(raw, "model", "name")
    if record_id is None or model is None:
        return None

    return Car(
        id=record_id,
        model=str(model),
        price_per_day=_price(raw, "pricePerDay", "price_per_day", "perDay", "price"),
        provider_contact=_text(raw, "providerContact", "provider_contact", "contact"),
        features=_strings(raw, "features"),
    )


def normalize_destination(raw: dict[str, Any]) -> Destination | None:
    """Destination record to Destination."""
    record_id = _record_id(raw)
    name = _first(raw, "name")
    if record_id is None or name is None:
        return None

    return Destination(
        id=record_id,
        name=str(name),
        city=_text(raw, "city"),
        country=_text(raw, "country"),
        tags=_strings(raw, "tags"),
    )


NORMALIZERS = {
    CatalogCategory.places: normalize_activity,
    CatalogCategory.hotels: normalize_hotel,
    CatalogCategory.cars: normalize_car,
    CatalogCategory.destinations: normalize_destination,
}


def normalize_items(category: CatalogCategory, data: Any) -> list[CatalogItem]:
    """Normalize a catalog response body, skipping records without id or name."""
    if not isinstance(data, list):
        logger.warning(f"[normalize] {category.value}: expected a list, got {type(data).__name__}")
        return []

    normalize = NORMALIZERS[category]
    items: list[CatalogItem] = []
    skipped = 0
    for raw in data:
        item = normalize(raw) if isinstance(raw, dict) else None
        if item is None:
            skipped += 1
            continue
        items.append(item)

    if skipped:
        logger.warning(f"[normalize] {category.value}: skipped {skipped} malformed records")
    return items
