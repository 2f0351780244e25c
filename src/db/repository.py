"""Protocol repository (implemented with SQLAlchemy, in-memory dict for the service tests)"""

from typing import Protocol
from uuid import UUID

from src.core.models import SolveSessionModel


class SessionRepository(Protocol):
    """Persistence layer orchestration"""

    def get_session(self, session_id: UUID) -> SolveSessionModel | None:
        """Get session by ID, if record exists."""
        ...

    def create_session(self, session: SolveSessionModel) -> tuple[SolveSessionModel, UUID]:
        """Store new session and return the stored data + newly created session ID."""
        ...

    def update_session(self, session_id: UUID, session: SolveSessionModel) -> SolveSessionModel | None:
        """Add new info to existing record."""
        ...

    def delete_session(self, session_id: UUID) -> SolveSessionModel | None:
        """Remove a session's record."""
        ...
