"""Shared pytest fixtures for all test suites."""

import pytest

from backend.app.models.catalog import Activity, Car, Hotel
from backend.app.models.common import TimeSlot
from backend.app.models.plan import TripPlan
from backend.app.planning.dates import set_window


@pytest.fixture
def activity() -> Activity:
    """A priced morning activity."""
    return Activity(id="a1", name="Old Town Walk", price=10, time_slot=TimeSlot.morning)


@pytest.fixture
def other_activity() -> Activity:
    return Activity(id="a2", name="Harbor Cruise", price=35, rating=4.6)


@pytest.fixture
def hotel() -> Hotel:
    return Hotel(id="h1", name="Harbor Inn", price_per_night=100)


@pytest.fixture
def other_hotel() -> Hotel:
    return Hotel(id="h2", name="Seaside Escape", price_per_night=140)


@pytest.fixture
def car() -> Car:
    return Car(id="c1", model="Compact", price_per_day=50, provider_contact="+1 555 0100")


@pytest.fixture
def two_day_plan() -> TripPlan:
    """Empty plan for 2025-06-01 -> 2025-06-03 (two days)."""
    return set_window(TripPlan(), "2025-06-01", "2025-06-03")


@pytest.fixture
def three_day_plan() -> TripPlan:
    """Empty plan for 2025-06-01 -> 2025-06-04 (three days)."""
    return set_window(TripPlan(), "2025-06-01", "2025-06-04")
