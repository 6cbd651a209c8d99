"""Cost models - derived totals for a trip plan."""

from datetime import date

from pydantic import BaseModel


class DayCost(BaseModel):
    """Cost for a single day of the trip."""

    day_index: int
    date: date
    activities: float
    hotel: float
    total: float


class CostBreakdown(BaseModel):
    """Cost breakdown by category."""

    activities: float
    hotels: float
    car: float
    total: float
    per_traveler: float
    days: list[DayCost]
