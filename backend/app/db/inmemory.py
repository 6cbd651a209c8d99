"""In-memory store of active planning sessions.

Plans are never persisted: a session lives until it is confirmed or
discarded, or the process exits.
"""

import uuid

from backend.app.config import get_settings
from backend.app.models.plan import TripPlan
from backend.app.planning.session import PlanningSession


class InMemorySessionRepository:
    """In-memory registry of PlanningSession objects."""

    def __init__(self) -> None:
        self._sessions: dict[uuid.UUID, PlanningSession] = {}

    def create_session(self, plan: TripPlan | None = None) -> PlanningSession:
        """Start a new planning session."""
        session = PlanningSession(plan, undo_depth=get_settings().undo_depth)
        self._sessions[session.session_id] = session
        return session

    def get_session(self, session_id: uuid.UUID) -> PlanningSession | None:
        """Get session by ID."""
        return self._sessions.get(session_id)

    def discard_session(self, session_id: uuid.UUID) -> bool:
        """Drop a session and its plan. Returns False if it did not exist."""
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


_repository = InMemorySessionRepository()


def get_session_repository() -> InMemorySessionRepository:
    """FastAPI dependency returning the process-wide session repository."""
    return _repository
