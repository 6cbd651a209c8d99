"""Shared FastAPI dependencies for the planning API."""

import uuid
from typing import Annotated

import httpx
from fastapi import Depends, HTTPException, status

from backend.app.db.inmemory import InMemorySessionRepository, get_session_repository
from backend.app.planning.session import PlanningSession


def get_http_client() -> httpx.AsyncClient | None:
    """Outbound HTTP client for catalog/booking calls.

    None means each call opens its own client; tests override this with a
    client on an httpx.MockTransport.
    """
    return None


def get_planning_session(
    plan_id: uuid.UUID,
    repo: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
) -> PlanningSession:
    """Resolve the {plan_id} path parameter to a live session.

    Raises:
        HTTPException: 404 if the session does not exist (never created,
            confirmed, or discarded)
    """
    session = repo.get_session(plan_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Plan {plan_id} not found",
        )
    return session
