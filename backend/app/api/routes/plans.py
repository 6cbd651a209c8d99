"""Planning endpoints - drive one trip plan session from any UI."""

import logging
import uuid
from collections.abc import Callable
from typing import Annotated, Any

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field

from backend.app.adapters.bookings import BookingSubmissionError, create_booking
from backend.app.adapters.catalog import CatalogClient
from backend.app.api.deps import get_http_client, get_planning_session
from backend.app.config import get_settings
from backend.app.db.inmemory import InMemorySessionRepository, get_session_repository
from backend.app.models.booking import BookingRecord
from backend.app.models.catalog import Activity, Car, CatalogResult, Destination, Hotel
from backend.app.models.common import (
    CatalogCategory,
    PaymentMethod,
    PlanStep,
    PlanVariant,
    TimeSlot,
)
from backend.app.models.cost import CostBreakdown
from backend.app.models.plan import TripPlan
from backend.app.models.violations import Violation
from backend.app.planning import dates, resources, slots
from backend.app.planning.cost import check_budget, compute_cost
from backend.app.planning.errors import PlanIncompleteError, PlanInputError
from backend.app.planning.serializer import build_booking_request, serialize_car, serialize_plan
from backend.app.planning.session import PlanningSession
from backend.app.planning.suggest import suggest_schedule
from backend.app.planning.validator import StepResult, summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["plans"])


class CreatePlanRequest(BaseModel):
    """Request body for POST /plans."""

    start_date: str | None = Field(None, description="Trip start (ISO date)")
    end_date: str | None = Field(None, description="Trip end (ISO date)")
    travelers: int | None = Field(None, ge=1)
    hotel_flow: bool | None = None
    variant: PlanVariant = PlanVariant.slots
    destination: Destination | None = None
    budget: float | None = Field(None, gt=0)
    preferences: list[str] = Field(default_factory=list)


class UpdatePlanRequest(BaseModel):
    """Request body for PATCH /plans/{plan_id}. Only provided fields change."""

    travelers: int | None = Field(None, ge=1)
    hotel_flow: bool | None = None
    variant: PlanVariant | None = None
    payment_method: PaymentMethod | None = None
    destination: Destination | None = None
    budget: float | None = Field(None, gt=0)
    preferences: list[str] | None = None


class WindowRequest(BaseModel):
    """Request body for PUT /plans/{plan_id}/window."""

    start_date: str | None = None
    end_date: str | None = None


class AssignSlotRequest(BaseModel):
    """Request body for POST /plans/{plan_id}/slots."""

    day: int = Field(..., ge=0, description="0-indexed from trip start")
    slot: TimeSlot
    activity: Activity


class CarRequest(BaseModel):
    """Request body for PUT /plans/{plan_id}/car."""

    car: Car | None


class CarNeededRequest(BaseModel):
    """Request body for PUT /plans/{plan_id}/car-needed."""

    needed: bool


class DayNoteRequest(BaseModel):
    """Request body for PUT /plans/{plan_id}/notes/{day}."""

    text: str = Field("", max_length=2000)


class SuggestRequest(BaseModel):
    """Request body for POST /plans/{plan_id}/suggest.

    Without activities, places for the plan's destination are fetched from
    the catalog.
    """

    activities: list[Activity] | None = None


class PlanResponse(BaseModel):
    """Current state of a planning session."""

    plan_id: str
    step: PlanStep
    can_undo: bool
    plan: TripPlan
    cost: CostBreakdown
    day_progress: list[int]  # occupied slots per day
    violations: list[Violation]  # blocking, for the current step
    advisories: list[Violation]


class ConfirmResponse(BaseModel):
    """Response for POST /plans/{plan_id}/confirm."""

    booking: BookingRecord
    request: dict[str, Any]


def _plan_response(session: PlanningSession) -> PlanResponse:
    plan = session.plan
    return PlanResponse(
        plan_id=str(session.session_id),
        step=session.step,
        can_undo=session.can_undo,
        plan=plan,
        cost=compute_cost(plan),
        day_progress=[slots.count_for_day(plan, day) for day in plan.window.day_indices],
        violations=session.violations(),
        advisories=check_budget(plan),
    )


def _apply(
    session: PlanningSession, reducer: Callable[..., TripPlan], *args: Any
) -> PlanResponse:
    """Apply a reducer, mapping bad input to 422."""
    try:
        session.apply(reducer, *args)
    except PlanInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        ) from e
    return _plan_response(session)


def _blocked(violations: list[Violation]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={
            "message": summarize(violations),
            "violations": [v.model_dump(mode="json") for v in violations],
        },
    )


SessionDep = Annotated[PlanningSession, Depends(get_planning_session)]


@router.post("", response_model=PlanResponse, status_code=status.HTTP_201_CREATED)
async def create_plan(
    request: CreatePlanRequest,
    repo: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
) -> PlanResponse:
    """Start a planning session with an empty plan."""
    settings = get_settings()
    plan = TripPlan(
        travelers=request.travelers or settings.default_travelers,
        hotel_flow=(
            request.hotel_flow if request.hotel_flow is not None else settings.hotel_flow_default
        ),
        variant=request.variant,
        budget=request.budget,
    )
    plan = dates.set_window(plan, request.start_date, request.end_date)
    plan = resources.set_destination(plan, request.destination)
    plan = resources.set_preferences(plan, request.preferences)

    session = repo.create_session(plan)
    logger.info(
        f"[POST /plans] plan_id={session.session_id} days={plan.day_count} "
        f"variant={plan.variant.value}"
    )
    return _plan_response(session)


@router.get("/{plan_id}", response_model=PlanResponse)
async def get_plan(session: SessionDep) -> PlanResponse:
    """Get the current plan, cost and violations."""
    return _plan_response(session)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_plan(
    plan_id: uuid.UUID,
    repo: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
) -> Response:
    """Abandon the planning flow. Nothing is persisted."""
    if not repo.discard_session(plan_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Plan {plan_id} not found"
        )
    logger.info(f"[DELETE /plans] plan_id={plan_id} discarded")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{plan_id}", response_model=PlanResponse)
async def update_plan(request: UpdatePlanRequest, session: SessionDep) -> PlanResponse:
    """Update trip-level settings."""
    fields = request.model_fields_set

    def reducer(plan: TripPlan) -> TripPlan:
        if "travelers" in fields and request.travelers is not None:
            plan = resources.set_travelers(plan, request.travelers)
        if "hotel_flow" in fields and request.hotel_flow is not None:
            plan = resources.set_hotel_flow(plan, request.hotel_flow)
        if "variant" in fields and request.variant is not None:
            plan = resources.set_variant(plan, request.variant)
        if "payment_method" in fields:
            plan = resources.set_payment_method(plan, request.payment_method)
        if "destination" in fields:
            plan = resources.set_destination(plan, request.destination)
        if "budget" in fields:
            plan = resources.set_budget(plan, request.budget)
        if "preferences" in fields:
            plan = resources.set_preferences(plan, request.preferences or [])
        return plan

    return _apply(session, reducer)


@router.put("/{plan_id}/window", response_model=PlanResponse)
async def set_window(request: WindowRequest, session: SessionDep) -> PlanResponse:
    """Set the trip dates. Invalid ranges give an empty (0-day) plan."""
    return _apply(session, dates.set_window, request.start_date, request.end_date)


@router.post("/{plan_id}/slots", response_model=PlanResponse)
async def assign_slot(request: AssignSlotRequest, session: SessionDep) -> PlanResponse:
    """Assign an activity to a slot; the same activity again clears it."""
    return _apply(session, slots.assign, request.day, request.slot, request.activity)


@router.delete("/{plan_id}/slots/{day}/{slot}", response_model=PlanResponse)
async def unassign_slot(day: int, slot: TimeSlot, session: SessionDep) -> PlanResponse:
    """Clear a slot."""
    return _apply(session, slots.unassign, day, slot)


@router.put("/{plan_id}/hotels/{day}", response_model=PlanResponse)
async def set_hotel(day: int, hotel: Hotel, session: SessionDep) -> PlanResponse:
    """Select the hotel for one night."""
    return _apply(session, resources.set_hotel_for_day, day, hotel)


@router.delete("/{plan_id}/hotels/{day}", response_model=PlanResponse)
async def clear_hotel(day: int, session: SessionDep) -> PlanResponse:
    """Remove the hotel for one night."""
    return _apply(session, resources.set_hotel_for_day, day, None)


@router.put("/{plan_id}/car", response_model=PlanResponse)
async def set_car(request: CarRequest, session: SessionDep) -> PlanResponse:
    """Select (or clear) the trip-wide rental car."""
    return _apply(session, resources.set_car, request.car)


@router.put("/{plan_id}/car-needed", response_model=PlanResponse)
async def set_car_needed(request: CarNeededRequest, session: SessionDep) -> PlanResponse:
    return _apply(session, resources.set_car_needed, request.needed)


@router.put("/{plan_id}/notes/{day}", response_model=PlanResponse)
async def set_day_note(day: int, request: DayNoteRequest, session: SessionDep) -> PlanResponse:
    """Set the free-text plan for a day."""
    return _apply(session, resources.set_day_note, day, request.text)


@router.get("/{plan_id}/cost", response_model=CostBreakdown)
async def get_cost(session: SessionDep) -> CostBreakdown:
    return compute_cost(session.plan)


@router.post("/{plan_id}/advance", response_model=StepResult)
async def advance(session: SessionDep) -> StepResult:
    """Move to the next step.

    Raises:
        HTTPException: 409 listing the violations if the step's guard fails
    """
    result = session.advance()
    if result.violations:
        raise _blocked(result.violations)
    return result


@router.post("/{plan_id}/back", response_model=StepResult)
async def back(session: SessionDep) -> StepResult:
    return session.back()


@router.post("/{plan_id}/undo", response_model=PlanResponse)
async def undo(session: SessionDep) -> PlanResponse:
    """Revert the last change to the plan."""
    if not session.undo():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Nothing to undo")
    return _plan_response(session)


@router.get("/{plan_id}/serialized")
async def get_serialized(session: SessionDep) -> dict[str, Any]:
    """Preview the booking wire format without validating the plan."""
    plan = session.plan
    car = serialize_car(plan)
    return {
        "customPlan": [day.model_dump(mode="json", by_alias=True) for day in serialize_plan(plan)],
        "carRental": car.model_dump(mode="json", by_alias=True) if car else None,
        "totalCost": compute_cost(plan).total,
    }


@router.get("/{plan_id}/catalog/{category}", response_model=CatalogResult)
async def get_catalog(
    category: CatalogCategory,
    session: SessionDep,
    client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
    destination_id: Annotated[str | None, Query()] = None,
) -> CatalogResult:
    """Fetch a catalog collection for this session.

    A response superseded by a newer request for the same category comes
    back with stale=true and no items.
    """
    settings = get_settings()
    catalog = CatalogClient(
        settings.catalog_base_url,
        timeout=settings.catalog_timeout_s,
        client=client,
        gate=session.catalog_gate,
    )
    return await catalog.fetch(category, destination_id or session.plan.destination_id)


@router.post("/{plan_id}/suggest", response_model=PlanResponse)
async def suggest(
    request: SuggestRequest,
    session: SessionDep,
    client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
) -> PlanResponse:
    """Fill empty slots with suggested activities."""
    activities = request.activities
    if activities is None:
        settings = get_settings()
        catalog = CatalogClient(
            settings.catalog_base_url,
            timeout=settings.catalog_timeout_s,
            client=client,
            gate=session.catalog_gate,
        )
        result = await catalog.fetch_places(session.plan.destination_id)
        activities = [item for item in result.items if isinstance(item, Activity)]

    return _apply(session, suggest_schedule, activities)


@router.post("/{plan_id}/confirm", response_model=ConfirmResponse)
async def confirm(
    session: SessionDep,
    repo: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
    client: Annotated[httpx.AsyncClient | None, Depends(get_http_client)],
) -> ConfirmResponse:
    """Validate the plan and hand it to the booking service.

    On success the session ends. On failure the plan is kept as-is so the
    user can retry.

    Raises:
        HTTPException: 409 if the flow has not reached the confirm step or
            validation fails, 502 if the booking service fails
    """
    if session.step != PlanStep.confirm:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Plan is at step {session.step.value}; advance to confirm first",
        )

    try:
        booking_request = build_booking_request(session.plan)
    except PlanIncompleteError as e:
        raise _blocked(e.violations) from e

    settings = get_settings()
    try:
        record = await create_booking(
            booking_request,
            settings.bookings_base_url,
            client=client,
            timeout=settings.booking_timeout_s,
        )
    except BookingSubmissionError as e:
        logger.warning(f"[POST /plans/confirm] plan_id={session.session_id} failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e

    repo.discard_session(session.session_id)
    logger.info(
        f"[POST /plans/confirm] plan_id={session.session_id} booking_id={record.booking_id}"
    )
    return ConfirmResponse(
        booking=record,
        request=booking_request.to_wire(),
    )
